from .app_discovery import (
    APP_DIRS,
    BUNDLE_SUFFIX,
    find_apps_recursive,
    list_apps,
    find_app_by_name,
)
