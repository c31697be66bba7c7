from .audit_hooks import log_evaluation

__all__ = ["log_evaluation"]
