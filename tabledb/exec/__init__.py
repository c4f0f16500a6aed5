"""Command execution: the executor and its WHERE evaluator."""
