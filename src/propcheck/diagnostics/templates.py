"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def missing_capabilities(type_name: str, missing: tuple[str, ...]) -> str:
        """Object passed as a property lacks callable capabilities.

        Args:
            type_name: Name of the offending object's type
            missing: Capability names that are absent or not callable

        Returns:
            Error message for PropertyContractError
        """
        names = ", ".join(missing)
        return (
            f"Expected a property exposing is_async(), generate() and evaluate(); "
            f"{type_name} is missing callable: {names}"
        )

    @staticmethod
    def unexpected_outcome(result: object) -> str:
        """evaluate() returned something that is not an outcome.

        Args:
            result: The value returned by evaluate()

        Returns:
            Error message for PropertyContractError
        """
        return (
            f"evaluate() must return None, a str, a PreconditionFailure or a "
            f"TrialOutcome; got {type(result).__name__}"
        )

    @staticmethod
    def generation_failed(run_index: int, seed: int, exc: BaseException) -> str:
        """generate() raised while producing a trial value.

        Args:
            run_index: Zero-based index of the trial being generated
            seed: Seed of the run
            exc: Exception raised by generate()

        Returns:
            Error message for GenerationError
        """
        return (
            f"generate() raised {type(exc).__name__} on run {run_index} "
            f"(seed: {seed}): {exc}"
        )

    @staticmethod
    def evaluation_timeout(timeout: float) -> str:
        """Asynchronous evaluation did not settle in time.

        Args:
            timeout: Configured timeout in milliseconds

        Returns:
            Failure cause recorded in the run report
        """
        return f"Property timeout: exceeded limit of {timeout:g} milliseconds"

    @staticmethod
    def predicate_raised(exc: BaseException) -> str:
        """Predicate of a Property raised instead of returning.

        Args:
            exc: Exception raised by the predicate

        Returns:
            Failure cause recorded in the run report
        """
        return f"{type(exc).__name__}: {exc}"

    @staticmethod
    def negative_parameter(name: str) -> str:
        """Run parameter that must be non-negative was negative.

        Args:
            name: Parameter name

        Returns:
            Error message for ValueError
        """
        return f"{name} must be non-negative"

    @staticmethod
    def parameters_conflict() -> str:
        """Both a RunParameters instance and keyword options were given.

        Returns:
            Error message for TypeError
        """
        return "Pass either a RunParameters instance or keyword options, not both"

    @staticmethod
    def no_arbitraries() -> str:
        """Property constructed without any arbitrary.

        Returns:
            Error message for ValueError
        """
        return "A property needs at least one arbitrary"
