pytest_plugins = ["mobilepay.testing.fixtures"]
