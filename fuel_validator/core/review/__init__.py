from fuel_validator.core.review.summary import severity_color, should_auto_reject, summarize

__all__ = ["severity_color", "summarize", "should_auto_reject"]
