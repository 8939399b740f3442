"""Error kinds surfaced by the earnings report."""


class EarningsError(Exception):
    """Base class for all report errors."""


class ConfigurationError(EarningsError):
    """Invalid report parameters or an empty wallet set."""


class FetchError(EarningsError):
    """Transport, HTTP or decoding failure while fetching a wallet."""

    def __init__(self, message: str, wallet_id: str = ""):
        super().__init__(message)
        self.wallet_id = wallet_id


class EmptyResultError(EarningsError):
    """The fetch succeeded but returned no transactions at all."""
