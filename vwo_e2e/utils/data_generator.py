# vwo_e2e/utils/data_generator.py

import string
from datetime import datetime
from typing import Dict, Optional

from faker import Faker

INVALID_EMAIL_FORMATS = [
    "no-at-sign.com",
    "@no-local-part.com",
    "multiple@@at.com",
    "no.domain@",
    "spaces in@email.com",
    "special!chars@email.com",
]

# Lower bound for date() when no start is given
DEFAULT_START_DATE = datetime(2020, 1, 1)

fake = Faker()


class DataGenerator:
    """Random test data generation."""

    @staticmethod
    def email(domain: Optional[str] = None) -> str:
        """Random address; a Faker-made one unless a domain is given."""
        if domain:
            return f"{DataGenerator.alphanumeric(10)}@{domain}"
        return fake.email()

    @staticmethod
    def password(length: int = 12) -> str:
        # Faker needs room for one char of each class (special, digit, upper, lower)
        return fake.password(length=length, special_chars=True)

    @staticmethod
    def first_name() -> str:
        return fake.first_name()

    @staticmethod
    def last_name() -> str:
        return fake.last_name()

    @staticmethod
    def full_name() -> str:
        return fake.name()

    @staticmethod
    def phone() -> str:
        return fake.phone_number()

    @staticmethod
    def address() -> Dict[str, str]:
        return {
            "street": fake.street_address(),
            "city": fake.city(),
            "state": fake.state(),
            "zip_code": fake.postcode(),
            "country": fake.country(),
        }

    @staticmethod
    def alphanumeric(length: int = 10) -> str:
        return fake.lexify("?" * length, letters=string.ascii_letters + string.digits)

    @staticmethod
    def uuid() -> str:
        return fake.uuid4()

    @staticmethod
    def number(minimum: int = 1, maximum: int = 100) -> int:
        return fake.random_int(min=minimum, max=maximum)

    @staticmethod
    def boolean() -> bool:
        return fake.pybool()

    @staticmethod
    def date(start: Optional[datetime] = None, end: Optional[datetime] = None) -> datetime:
        """Random datetime between `start` (2020-01-01) and `end` (now)."""
        return fake.date_time_between(
            start_date=start or DEFAULT_START_DATE,
            end_date=end or datetime.now(),
        )

    @staticmethod
    def credit_card() -> Dict[str, str]:
        """Dummy card; expiry is `MM/YY` with the year in 25-30."""
        month = fake.random_int(min=1, max=12)
        year = fake.random_int(min=25, max=30)
        return {
            "number": fake.credit_card_number(),
            "cvv": fake.credit_card_security_code(),
            "expiry": f"{month:02d}/{year}",
        }

    @staticmethod
    def invalid_email() -> str:
        """Malformed address for negative testing."""
        return fake.random_element(INVALID_EMAIL_FORMATS)
