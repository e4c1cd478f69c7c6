from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the host
configuration (JSON file plus command-line overrides), pipeline execution
and output rendering.
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

from docsidebar.core.analysis.sidebar_renderer import render_sidebar
from docsidebar.core.pipeline.engine import generate_sidebar, with_dynamic_sidebar
from docsidebar.core.pipeline.validator import validate_options
from docsidebar.domain.config import get_default_options, load_options
from docsidebar.domain.constants import KEY_IGNORE, KEY_SIDEBAR, KEY_SRC_DIR, KEY_THEME_CONFIG
from docsidebar.domain.errors import ConfigurationError
from docsidebar.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from docsidebar.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        # Flush queued records before the process exits
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    """Resolve the configuration, run the pipeline and render the output."""
    logger.debug("CLI execution initiated. Resolving configuration...")

    try:
        base_conf = load_options(args.config_path) if args.config_path else get_default_options()
        options = _merge_options(base_conf, cli_args.args_to_overrides(args))
        scan_settings = cli_args.args_to_scan_settings(args)

        if args.print_tree:
            lines = _preview(options, scan_settings)
            print("\n".join(lines) if lines else "(empty sidebar)")
            return EXIT_OK

        result = with_dynamic_sidebar(options, **scan_settings)
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.error(f"Cannot read source directory: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    payload: Any = result
    if args.sidebar_only:
        payload = result[KEY_THEME_CONFIG][KEY_SIDEBAR]

    _write_json(payload, args.output_path)
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_options(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge command-line overrides into the host configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def _preview(options: Dict[str, Any], scan_settings: Dict[str, Any]) -> List[str]:
    """Build the sidebar and render it as ASCII lines."""
    clean, _ = validate_options(options)
    sidebar = generate_sidebar(clean[KEY_SRC_DIR], clean[KEY_IGNORE], **scan_settings)
    return render_sidebar(sidebar)


def _write_json(payload: Any, output_path: Optional[str]) -> None:
    """Serialize payload to stdout or to a file."""
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if not output_path:
        print(text)
        return

    out_dir = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(out_dir, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    logger.info(f"Configuration written to {output_path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
