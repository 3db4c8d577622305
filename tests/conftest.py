from superfactory.testing.fixtures import default_factory, factory  # noqa: F401
