"""
Version information for the Hold'em engine.
"""

VERSION = "0.4.0"
BUILD_DATE = "2026-10-18"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
        'build_date': BUILD_DATE,
    }


def version_string() -> str:
    info = get_version_info()
    return f"holdem {info['version']} ({info['build_date']})"
