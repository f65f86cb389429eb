pytest_plugins = ["selligent_sdk.testing.fixtures"]
