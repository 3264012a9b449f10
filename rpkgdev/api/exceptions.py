"""Exception definitions for rpkgdev API"""


class RpkgdevError(Exception):
    """Base exception for rpkgdev"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class InvalidNameError(RpkgdevError):
    """Package name does not satisfy the naming pattern"""

    def __init__(self, name: str):
        message = (
            f"Invalid package name: '{name}'. Package names must start with a "
            f"letter and contain only letters, numbers, and dots"
        )
        super().__init__(message, "RP001")
        self.name = name


class DestinationExistsError(RpkgdevError):
    """Target directory already exists"""

    def __init__(self, path: str):
        message = (
            f"Directory already exists: {path}. "
            f"Pass overwrite (--overwrite) to replace existing files"
        )
        super().__init__(message, "RP002")
        self.path = path


class TemplateNotFoundError(RpkgdevError):
    """Bundled template assets are missing"""

    def __init__(self, path: str):
        message = (
            f"Template files not found at {path}. "
            f"rpkgdev may not be installed correctly; reinstall it"
        )
        super().__init__(message, "RP003")
        self.path = path


class PrerequisiteMissingError(RpkgdevError):
    """Optional external tool is unavailable"""

    def __init__(self, tool: str, step: str):
        message = f"{tool} not found, skipping {step}"
        super().__init__(message, "RP004")
        self.tool = tool
        self.step = step


class PackageNotFoundError(RpkgdevError):
    """Directory is not an R package"""

    def __init__(self, path: str):
        message = f"Not a valid package directory: {path} (DESCRIPTION file not found)"
        super().__init__(message, "RP005")
        self.path = path


class ConfigError(RpkgdevError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, "RP006")
