"""
Main CLI entry point for dopbroad.
"""

import argparse
import sys

from dopbroad.core.logging_config import setup_logging, get_logger

logger = get_logger("cli.main")

DEFAULT_ANGLES_DEG = [0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 180.0]


def _build_model(args):
    """Create a BroadeningModel from a config file and/or command-line flags."""
    from dopbroad.broadening.model import BroadeningModel
    from dopbroad.core.units import convert_energy

    energy_mev = None
    if args.energy is not None:
        energy_mev = convert_energy(args.energy, args.energy_unit, "MeV")

    if args.config:
        logger.info(f"Loading configuration from {args.config}")
        model = BroadeningModel.from_file(args.config)
        # Flags given on the command line override the file
        model.update_parameters(
            energy_mev=energy_mev,
            beta=args.beta,
            d_theta_deg=args.dtheta,
            resolution_const=args.res_const,
            d_beta=args.dbeta,
        )
        return model

    if energy_mev is None or args.beta is None:
        raise ValueError("Either a config file or both --energy and --beta are required")

    return BroadeningModel(
        energy_mev=energy_mev,
        beta=args.beta,
        d_theta_deg=args.dtheta if args.dtheta is not None else 0.0,
        resolution_const=args.res_const if args.res_const is not None else 1.0,
        d_beta=args.dbeta if args.dbeta is not None else 0.0,
    )


def evaluate_cmd(args):
    """Evaluate the broadening contributions at the requested angles."""
    import numpy as np

    model = _build_model(args)
    functions = model.functions()
    angles = np.asarray(args.angles if args.angles else DEFAULT_ANGLES_DEG, dtype=float)

    logger.info(f"Evaluating {len(functions)} functions at {len(angles)} angles")

    columns = [f(angles) for f in functions]

    print("# " + ",".join(["angle_deg"] + [f.name for f in functions]))
    for i, angle in enumerate(angles):
        values = ",".join(f"{col[i]:.6e}" for col in columns)
        print(f"{angle:.3f},{values}")


def init_config_cmd(args):
    """Write a template configuration file."""
    from dopbroad.broadening.model import PhysicalParameters
    from dopbroad.core.config import save_config

    parameters = PhysicalParameters.from_degrees(
        energy_mev=1.0, beta=0.05, d_theta_deg=10.0, resolution_const=0.03, d_beta=0.001
    )
    save_config({"broadening": parameters.to_dict()}, args.path)
    print(f"Configuration template saved to {args.path}")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="dopbroad: Doppler broadening of gamma-ray detector resolution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Evaluation command
    evaluate_parser = subparsers.add_parser(
        "evaluate", help="Print broadening contributions at given detector angles"
    )
    evaluate_parser.add_argument(
        "config", type=str, nargs="?", default=None, help="Path to configuration file (YAML or JSON)"
    )
    evaluate_parser.add_argument(
        "--energy", type=float, default=None, help="Emitted gamma-ray energy"
    )
    evaluate_parser.add_argument(
        "--energy-unit",
        choices=["MeV", "keV", "eV"],
        default="MeV",
        help="Unit of --energy (default: MeV)",
    )
    evaluate_parser.add_argument(
        "--beta", type=float, default=None, help="Source velocity as a fraction of c"
    )
    evaluate_parser.add_argument(
        "--dtheta", type=float, default=None, help="Detector angular half-acceptance in degrees"
    )
    evaluate_parser.add_argument(
        "--res-const",
        type=float,
        default=None,
        help="Constant of the const/sqrt(E) resolution term in sqrt(MeV)",
    )
    evaluate_parser.add_argument(
        "--dbeta", type=float, default=None, help="Width of the beta distribution"
    )
    evaluate_parser.add_argument(
        "--angles",
        type=float,
        nargs="+",
        default=None,
        help="Polar angles in degrees (default: 0 to 180 in 30 degree steps)",
    )
    evaluate_parser.set_defaults(func=evaluate_cmd)

    # Config template command
    init_parser = subparsers.add_parser("init-config", help="Write a template configuration file")
    init_parser.add_argument("path", type=str, help="Output path (.yaml or .json)")
    init_parser.set_defaults(func=init_config_cmd)

    args = parser.parse_args()

    # Setup logging
    setup_logging(level=args.log_level)

    # Execute command
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except Exception as e:
        logger.error(f"Error executing command: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
