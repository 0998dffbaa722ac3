from blisp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
