from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TclData")
except PackageNotFoundError:
    version = "0.0.0"
