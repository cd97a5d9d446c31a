"""End-to-end browser tests for the VWO login flow."""
