"""Upload failure error."""


class UploadTransportError(Exception):
    """Raised when the uploader reports that the upload did not succeed."""
