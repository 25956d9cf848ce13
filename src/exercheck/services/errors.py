"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a combatant cannot be created from a definition."""


class ScenarioError(Exception):
    """Raised when a scenario roster does not match the required role layout."""


class LearnerImportError(Exception):
    """Raised when a learner's fight implementation cannot be imported."""
