class DomainError(Exception):
    """Base class for errors surfaced by the page-building layer."""

    kind = "error"


class NotFound(DomainError):
    kind = "not_found"


class PersistenceFailure(DomainError):
    """The database rejected a read or write. Sub-causes are not distinguished."""

    kind = "persistence_failure"


class PartialReorderFailure(DomainError):
    """
    A reorder stopped partway. Rows updated before the failure keep their
    new positions; nothing is rolled back.
    """

    kind = "partial_reorder_failure"

    def __init__(self, message, *, applied, total):
        super().__init__(message)
        self.applied = applied
        self.total = total


class ConfigurationError(DomainError):
    kind = "configuration_error"


class UnsupportedComponent(ConfigurationError):
    kind = "unsupported_component"

    def __init__(self, component_type):
        super().__init__(f"No renderer registered for component type '{component_type}'")
        self.component_type = component_type


class InvalidComponentConfig(ConfigurationError):
    kind = "invalid_component_config"

    def __init__(self, component_type, message):
        super().__init__(f"Invalid {component_type} config: {message}")
        self.component_type = component_type
