"""Parameters of the randomized power-iteration estimator."""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .algos._checks import as_finite
from .algos.planner import validate_parameters, validate_seed
from .errors import InvalidParameterError


@dataclass(frozen=True)
class AlgorithmConfig:
    """Accuracy and confidence parameters for one estimator run.

    The iteration count is ceil(ln(m**beta / epsilon) / epsilon); with
    probability at least 1 - 2 * alpha * sqrt(2m - 1) the returned left vector
    has a component of at most epsilon / (alpha * m**beta) orthogonal to the
    dominant subspace.

    Values are not checked here. They are validated once per invocation by
    :func:`powersvd.algos.planner.plan_iterations`, so an out-of-range config
    can be built and passed around, and fails only when it is used.

    Attributes:
        epsilon: accuracy parameter, 0 < epsilon <= 1
        alpha: confidence parameter, 0 < alpha <= 1
        beta: exponent on the column count, beta >= 0.5
        seed: integer seed for the starting vector (None draws fresh OS
            entropy). A numpy Generator is rejected when the config is used.
    """

    epsilon: float
    alpha: float
    beta: float
    seed: Optional[int] = None

    def validate(self, m: int) -> None:
        """Run the planner checks for a matrix with ``m`` columns."""
        validate_parameters(self.epsilon, self.alpha, self.beta, m)
        validate_seed(self.seed)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "AlgorithmConfig":
        """Build a config from a plain dict such as a parsed settings file."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise InvalidParameterError(
                unknown[0], f"Unknown config key(s): {', '.join(unknown)}"
            )
        missing = [name for name in ("epsilon", "alpha", "beta") if name not in mapping]
        if missing:
            raise InvalidParameterError(
                missing[0], f"Missing config key(s): {', '.join(missing)}"
            )
        return cls(
            epsilon=as_finite("epsilon", mapping["epsilon"]),
            alpha=as_finite("alpha", mapping["alpha"]),
            beta=as_finite("beta", mapping["beta"]),
            seed=validate_seed(mapping.get("seed")),
        )
