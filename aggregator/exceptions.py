# aggregator/exceptions.py


class AggregatorError(Exception):
    """Base des erreurs de l'agrégateur."""


class ConfigurationIncomplete(AggregatorError):
    """Réglages du site ou du formulaire absents: mode récepteur / non configuré."""


class RemoteError(AggregatorError):
    """Échec d'un appel à l'API distante (réseau, authentification, validation)."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class RemoteFormCreationFailed(AggregatorError):
    pass


class RemoteEntryForwardFailed(AggregatorError):
    pass


class LocalDeletionFailed(AggregatorError):
    pass
