"""Command-line entry point for whois field resolution."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from dotenv import load_dotenv

from whois_fields.config.environment import EnvironmentConfig
from whois_fields.config.exceptions import ConfigurationError
from whois_fields.config.loader import load_config
from whois_fields.config.models import AppConfig
from whois_fields.domain.models import CONTACT_ATTRIBUTES, DOMAIN_KEYS, CanonicalKey, ContactRole
from whois_fields.logging import get_logger
from whois_fields.logging.config import configure_logging
from whois_fields.normalization import DEFAULT_TABLE, FieldResolver, NormalizationTable

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI > LOG_LEVEL environment variable > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level or "INFO"

    return app_config, env_config


def build_table(app_config: AppConfig) -> NormalizationTable:
    """Return the built-in table, extended with configured extra rules.

    Raises:
        NormalizationTableError: If an extra rule contradicts the table
    """
    if not app_config.extra_rules:
        return DEFAULT_TABLE
    return NormalizationTable.build(extra_rules=app_config.extra_rule_pairs())


def missing_keys(table: NormalizationTable, role: ContactRole) -> List[CanonicalKey]:
    """Canonical keys of a role that no label in its table reaches."""
    expected = list(DOMAIN_KEYS) + [
        CanonicalKey.for_role(role, attribute) for attribute in CONTACT_ATTRIBUTES
    ]
    reachable = table.reachable_keys(role)
    return [key for key in expected if key not in reachable]


def run_check(table: NormalizationTable) -> int:
    """Print per-role label counts and key coverage; 1 if a key is unreachable."""
    exit_code = 0
    for role in ContactRole:
        missing = missing_keys(table, role)
        status = "ok" if not missing else "missing " + ", ".join(key.value for key in missing)
        print(f"{role.value:<10} {len(table.for_role(role)):>4} labels  {status}")
        if missing:
            exit_code = 1

    logger.info(
        "Table check completed",
        extra={"event": "cli.check.completed", "base_labels": len(table), "ok": exit_code == 0},
    )
    return exit_code


def run_resolve(resolver: FieldResolver, label: str, role: str) -> int:
    """Print the canonical key for a label, or 'unmapped'."""
    key = resolver.resolve(label, role)
    print(key.value if key is not None else "unmapped")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whois-fields",
        description="Map raw whois field labels onto canonical field keys",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: whois_fields.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Validate the label table and report key coverage")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a single raw label")
    resolve_parser.add_argument("label", help="Raw label, e.g. 'Admin Email:'")
    resolve_parser.add_argument(
        "--role",
        default=ContactRole.REGISTRANT.value,
        choices=[role.value for role in ContactRole],
        help="Contact section the label appears in (default: registrant)",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the whois-fields command.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
            stream=sys.stderr,
        )

        table = build_table(app_config)
        logger.debug(
            "Label table ready",
            extra={
                "event": "cli.table.ready",
                "base_labels": len(table),
                "extra_rules": len(app_config.extra_rules),
            },
        )

        if args.command == "check":
            return run_check(table)

        resolver = FieldResolver(table, log_unmapped=app_config.log_unmapped_labels)
        return run_resolve(resolver, args.label, args.role)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        logger.error(
            "Configuration error",
            extra={"event": "config.error", "error_type": type(e).__name__},
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
