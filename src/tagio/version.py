from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TagIO")
except PackageNotFoundError:
    version = "0.0.0"
