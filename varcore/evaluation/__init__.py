from .evaluator import evaluate, TreeWalkingBackend

__all__ = ["evaluate", "TreeWalkingBackend"]
