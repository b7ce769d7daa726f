"""Error taxonomy for registry submissions.

Every failure that can end a submission pipeline derives from SubmissionError.
Those are caught at the pipeline boundary and reported through the JSON
``validation`` field. InitializationError and ReportError are never reported
that way: the first happens before there is anything to report into, the
second means the reporting mechanism itself is broken.
"""


class RegistryAddError(Exception):
    """Base class for all registry-add errors."""


class InitializationError(RegistryAddError):
    """Required process configuration (such as the GitHub token) is missing."""


class ReportError(RegistryAddError):
    """The JSON result could not be written."""


class SubmissionError(RegistryAddError):
    """A pipeline stage rejected the submission."""


class ParseError(SubmissionError):
    """Repository name does not match the expected naming convention."""


class AddressFormatError(SubmissionError):
    """Canonical address was rejected by the registry address grammar."""


class DuplicateError(SubmissionError):
    """An entry with the same address already exists in the catalog."""


class MetadataFetchError(SubmissionError):
    """The hosting platform could not be queried for versions."""


class NoVersionsError(SubmissionError):
    """The repository has no versions that can be published."""


class PersistError(SubmissionError):
    """The submission could not be written to the catalog."""
