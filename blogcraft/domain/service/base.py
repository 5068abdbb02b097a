"""Base class for domain services."""


class Service:
    """Marker base for services that combine repositories and view assembly.

    Services are stateless apart from their injected collaborators.
    """
