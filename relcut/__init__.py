"""relcut - cut a release from a build descriptor."""

__version__ = "0.1.0"
