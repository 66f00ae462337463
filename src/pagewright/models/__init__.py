from pagewright.models.envelope import ErrorEnvelope

__all__ = ["ErrorEnvelope"]
