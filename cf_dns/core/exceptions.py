"""
Exception hierarchy for cf-dns.

Every error raised by the package inherits from :class:`CfDnsError`. All of
them are local to one command: the dispatcher reports them and the
interactive loop keeps running.
"""


class CfDnsError(Exception):
    """Root exception for all cf-dns errors."""


class ConfigError(CfDnsError):
    """Configuration file could not be read or is invalid."""


# Command registry / lookup


class CommandRegistrationError(CfDnsError):
    """Command tree was built with a duplicate name or shortcut."""


class CommandLookupError(CfDnsError):
    """Typed command line could not be resolved to a command."""


class CommandNotFoundError(CommandLookupError):
    """No command matches the typed name."""


class AmbiguousCommandError(CommandLookupError):
    """Typed name is a prefix of more than one command."""


class MalformedQuotingError(CommandLookupError):
    """Command line contains an unterminated quote."""


class UsageError(CfDnsError):
    """Command was given the wrong number of arguments."""


# Session / provider


class CredentialError(CfDnsError):
    """A required credential or zone name is not available."""

    def __init__(self, variable: str):
        super().__init__(f"{variable} not set.")
        self.variable = variable


class ProviderError(CfDnsError):
    """The remote DNS provider rejected a request or could not be reached."""
