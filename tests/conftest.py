pytest_plugins = ["actiongate.testing.fixtures"]
