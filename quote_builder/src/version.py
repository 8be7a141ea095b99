# Version information
VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0

APP_NAME = "QuoteBuilder Pro"

# Get version string
def get_version():
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

# Get full version info with optional build date
def get_version_info(include_build_date=True):
    import datetime
    version = get_version()

    if include_build_date:
        build_date = datetime.datetime.now().strftime("%Y-%m-%d")
        return f"{APP_NAME} v{version} (Build: {build_date})"

    return f"{APP_NAME} v{version}"
