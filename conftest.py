# conftest.py

# Shared fixtures (driver, page objects, modules, test data) live in the package
pytest_plugins = ["vwo_e2e.fixtures.browser"]
