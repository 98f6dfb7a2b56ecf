"""Core pipeline: syntax (lexer, parser, tree), evaluator, configuration and errors."""
