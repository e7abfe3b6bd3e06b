"""Custom exceptions for gmail-mcp."""


class GmailMcpError(Exception):
    """Base exception for gmail-mcp."""


class ConfigError(GmailMcpError):
    """Raised when there is a configuration error."""


class AuthorizationError(ConfigError):
    """Raised when no usable OAuth credentials are available."""


class InvalidArgumentError(GmailMcpError, ValueError):
    """Raised when a tool caller supplies an invalid argument."""


class AttachmentIndexError(InvalidArgumentError):
    """Raised when a requested attachment index does not exist."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        if count == 0:
            message = f"Attachment index {index} out of range (message has no attachments)"
        else:
            message = f"Attachment index {index} out of range (0-{count - 1})"
        super().__init__(message)
