"""
Broadening model binding physical parameters to named angle functions.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple, Union
import numpy as np

from dopbroad.broadening.contributions import (
    beta_broadening,
    energy_broadening,
    solid_angle_broadening,
    total_broadening,
)
from dopbroad.broadening.kinematics import check_beta
from dopbroad.core.constants import (
    ANGLE_DOMAIN_DEG,
    DEFAULT_D_BETA,
    DEFAULT_D_THETA_DEG,
    DEFAULT_RESOLUTION_CONST,
)
from dopbroad.core.logging_config import get_logger
from dopbroad.core.units import convert_angle

logger = get_logger("broadening.model")


@dataclass(frozen=True)
class PhysicalParameters:
    """
    Immutable set of inputs for the broadening functions.

    Attributes
    ----------
    energy_mev : float
        Emitted gamma-ray energy in MeV
    beta : float
        Source velocity as a fraction of c, strictly inside (-1, 1)
    d_theta_rad : float
        Angular half-acceptance of the detector in radians
    resolution_const : float
        Constant of the const/sqrt(E) resolution term in sqrt(MeV)
    d_beta : float
        Standard deviation of the beta distribution
    """

    energy_mev: float
    beta: float
    d_theta_rad: float = 0.0
    resolution_const: float = DEFAULT_RESOLUTION_CONST
    d_beta: float = DEFAULT_D_BETA

    def __post_init__(self):
        self.validate()

    @classmethod
    def from_degrees(
        cls,
        energy_mev: float,
        beta: float,
        d_theta_deg: float = DEFAULT_D_THETA_DEG,
        resolution_const: float = DEFAULT_RESOLUTION_CONST,
        d_beta: float = DEFAULT_D_BETA,
    ) -> "PhysicalParameters":
        """Create parameters with the detector opening angle given in degrees."""
        if d_theta_deg < 0:
            raise ValueError(f"d_theta_deg must be non-negative, got {d_theta_deg}")
        return cls(
            energy_mev=energy_mev,
            beta=beta,
            d_theta_rad=convert_angle(d_theta_deg, "deg", "rad"),
            resolution_const=resolution_const,
            d_beta=d_beta,
        )

    @property
    def d_theta_deg(self) -> float:
        """Angular half-acceptance of the detector in degrees."""
        return convert_angle(self.d_theta_rad, "rad", "deg")

    def validate(self) -> bool:
        """
        Validate parameter values.

        Returns
        -------
        bool
            True if valid

        Raises
        ------
        ValueError
            If any parameter is outside its physical range
        """
        for name, value in self.to_dict().items():
            if not np.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")

        if self.energy_mev <= 0:
            raise ValueError(f"Gamma-ray energy must be positive, got {self.energy_mev} MeV")

        check_beta(self.beta)

        if self.d_theta_rad < 0:
            raise ValueError(f"Detector opening angle must be non-negative, got {self.d_theta_rad}")

        if self.resolution_const <= 0:
            raise ValueError(f"Resolution constant must be positive, got {self.resolution_const}")

        if self.d_beta < 0:
            raise ValueError(f"Beta spread must be non-negative, got {self.d_beta}")

        return True

    def as_tuple(self) -> Tuple[float, float, float, float, float]:
        """Parameter vector (energy, beta, dtheta [rad], resolution const, dbeta)."""
        return (self.energy_mev, self.beta, self.d_theta_rad, self.resolution_const, self.d_beta)

    def to_dict(self) -> Dict[str, float]:
        """Convert to a dictionary in the layout of the 'broadening' config section."""
        return {
            "energy_mev": self.energy_mev,
            "beta": self.beta,
            "d_theta_deg": self.d_theta_deg,
            "resolution_const": self.resolution_const,
            "d_beta": self.d_beta,
        }


@dataclass(frozen=True)
class AngleFunction:
    """
    Broadening contribution as a function of polar angle in degrees.

    Instances are bound to one parameter snapshot and never change; the
    model hands out new instances after its parameters are updated.

    Attributes
    ----------
    name : str
        Identifier, e.g. 'totalBroadening'
    title : str
        Display name, e.g. 'Total Broadening'
    parameters : PhysicalParameters
        Parameter snapshot the function is evaluated with
    kernel : callable
        kernel(angle_deg, parameters) -> dE/E
    domain : Tuple[float, float]
        Angle range in degrees the curve is meant to be displayed over
    """

    name: str
    title: str
    parameters: PhysicalParameters
    kernel: Callable[[Any, PhysicalParameters], Any] = field(repr=False, compare=False)
    domain: Tuple[float, float] = ANGLE_DOMAIN_DEG

    def __call__(self, angle_deg: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        value = self.kernel(angle_deg, self.parameters)
        if not np.all(np.isfinite(value)):
            logger.warning(f"{self.title} evaluated to a non-finite value (parameters: {self})")
        return value

    @property
    def parameter_vector(self) -> Tuple[float, float, float, float, float]:
        return self.parameters.as_tuple()


def _energy_kernel(angle_deg, p: PhysicalParameters):
    return energy_broadening(angle_deg, p.energy_mev, p.beta, p.resolution_const)


def _solid_angle_kernel(angle_deg, p: PhysicalParameters):
    return solid_angle_broadening(angle_deg, p.beta, p.d_theta_rad)


def _beta_kernel(angle_deg, p: PhysicalParameters):
    return beta_broadening(angle_deg, p.beta, p.d_beta)


def _total_kernel(angle_deg, p: PhysicalParameters):
    return total_broadening(
        angle_deg, p.energy_mev, p.beta, p.d_theta_rad, p.resolution_const, p.d_beta
    )


# name -> (title, kernel), in display order
FUNCTION_DEFINITIONS = {
    "energyBroadening": ("Energy Broadening", _energy_kernel),
    "solidAngleBroadening": ("Solid Angle Broadening", _solid_angle_kernel),
    "betaBroadening": ("Beta Broadening", _beta_kernel),
    "totalBroadening": ("Total Broadening", _total_kernel),
}


class _ModelState(NamedTuple):
    parameters: PhysicalParameters
    functions: Dict[str, AngleFunction]


class BroadeningModel:
    """
    Energy resolution broadening of a detector viewing a moving gamma-ray source.

    Holds the five physical inputs and the four derived angle functions:
    energy, solid angle, beta and total broadening. The parameters and the
    functions are stored together as one immutable bundle that is replaced
    as a whole by :meth:`update_parameters`.

    Parameters
    ----------
    energy_mev : float
        Emitted gamma-ray energy in MeV
    beta : float
        Source velocity as a fraction of c
    d_theta_deg : float
        Angular half-acceptance of the detector in degrees
    resolution_const : float
        Constant of the const/sqrt(E) resolution term in sqrt(MeV)
    d_beta : float
        Standard deviation of the beta distribution

    Examples
    --------
    >>> model = BroadeningModel(1.0, 0.05, d_theta_deg=10, resolution_const=0.03)
    >>> total = model.get_total_broadening()
    >>> total(np.linspace(0, 180, 181)).shape
    (181,)
    """

    def __init__(
        self,
        energy_mev: float,
        beta: float,
        d_theta_deg: float = DEFAULT_D_THETA_DEG,
        resolution_const: float = DEFAULT_RESOLUTION_CONST,
        d_beta: float = DEFAULT_D_BETA,
    ):
        parameters = PhysicalParameters.from_degrees(
            energy_mev, beta, d_theta_deg, resolution_const, d_beta
        )
        self._state = self._derive(parameters)
        logger.info(
            f"Created BroadeningModel: E={energy_mev:.4g} MeV, beta={beta:.4g}, "
            f"dtheta={d_theta_deg:.4g} deg, const={resolution_const:.4g}, dbeta={d_beta:.4g}"
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "BroadeningModel":
        """
        Create a model from a configuration dictionary.

        Parameters
        ----------
        config : dict
            Configuration with a 'broadening' section

        Returns
        -------
        BroadeningModel
            Model instance
        """
        from dopbroad.core.config import validate_broadening_config

        validate_broadening_config(config)
        section = config["broadening"]

        return cls(
            energy_mev=section["energy_mev"],
            beta=section["beta"],
            d_theta_deg=section.get("d_theta_deg", DEFAULT_D_THETA_DEG),
            resolution_const=section.get("resolution_const", DEFAULT_RESOLUTION_CONST),
            d_beta=section.get("d_beta", DEFAULT_D_BETA),
        )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "BroadeningModel":
        """Create a model from a YAML or JSON configuration file."""
        from dopbroad.core.config import load_config

        return cls.from_config(load_config(config_path))

    @staticmethod
    def _derive(parameters: PhysicalParameters) -> _ModelState:
        functions = {
            name: AngleFunction(name=name, title=title, parameters=parameters, kernel=kernel)
            for name, (title, kernel) in FUNCTION_DEFINITIONS.items()
        }
        return _ModelState(parameters, functions)

    @property
    def parameters(self) -> PhysicalParameters:
        """Current parameter snapshot."""
        return self._state.parameters

    def update_parameters(
        self,
        energy_mev: Optional[float] = None,
        beta: Optional[float] = None,
        d_theta_deg: Optional[float] = None,
        resolution_const: Optional[float] = None,
        d_beta: Optional[float] = None,
    ) -> None:
        """
        Replace parameters and re-derive all four angle functions.

        Arguments left as None keep their current value; calling without
        arguments re-derives the functions from the current parameters. If
        the new values are invalid the model is left unchanged.

        Raises
        ------
        ValueError
            If the resulting parameter set is invalid
        """
        current = self._state.parameters
        changes = {}
        if energy_mev is not None:
            changes["energy_mev"] = energy_mev
        if beta is not None:
            changes["beta"] = beta
        if d_theta_deg is not None:
            if d_theta_deg < 0:
                raise ValueError(f"d_theta_deg must be non-negative, got {d_theta_deg}")
            changes["d_theta_rad"] = convert_angle(d_theta_deg, "deg", "rad")
        if resolution_const is not None:
            changes["resolution_const"] = resolution_const
        if d_beta is not None:
            changes["d_beta"] = d_beta

        parameters = replace(current, **changes)
        self._state = self._derive(parameters)
        logger.debug(f"Updated parameters: {parameters.to_dict()}")

    def get_energy_broadening(self) -> AngleFunction:
        """Resolution from the intrinsic detector response at the shifted energy."""
        return self._state.functions["energyBroadening"]

    def get_solid_angle_broadening(self) -> AngleFunction:
        """Resolution broadening from the detector opening angle."""
        return self._state.functions["solidAngleBroadening"]

    def get_beta_broadening(self) -> AngleFunction:
        """Resolution broadening from the spread of beta values."""
        return self._state.functions["betaBroadening"]

    def get_total_broadening(self) -> AngleFunction:
        """Quadrature sum of the energy, solid angle and beta contributions."""
        return self._state.functions["totalBroadening"]

    def functions(self) -> List[AngleFunction]:
        """All four angle functions in display order."""
        return list(self._state.functions.values())

    def __repr__(self) -> str:
        p = self._state.parameters
        return (
            f"BroadeningModel(energy_mev={p.energy_mev}, beta={p.beta}, "
            f"d_theta_deg={p.d_theta_deg}, resolution_const={p.resolution_const}, "
            f"d_beta={p.d_beta})"
        )
