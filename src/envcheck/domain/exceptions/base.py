"""Base exceptions for envcheck domain."""


class EnvCheckError(Exception):
    """Root exception for all envcheck errors.

    Covers failures around analysis, never the findings themselves:
    an ESTree document that cannot be loaded or lacks ``loc`` data
    (ParsingError, ASTError), a lint config or rule options that break
    their schema (ConfigurationError, RuleValidationError), and
    diagnostics surfaced by assert_no_violations() (ViolationsFoundError).
    Diagnostics from the rule itself are reported, not raised.

    The CLI catches this type and exits with status 2.
    """
