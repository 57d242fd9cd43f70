"""depsync - ensure a project's npm packages are installed and declared.

    Returns:
        int: Exit code
"""
import logging
import os
import sys
from typing import Dict, List, Tuple

from args import parse_args
from cli_config import build_options, load_config
from common.errors import ConfigurationError, ExecutionError
from common.logging_utils import add_file_handler, configure_logging
from common.text import listify
from constants import Constants, ExitCodes
from reconcile import install, plan_install, uninstall
from versioning.parser import tokenize_rightmost_at

logger = logging.getLogger(__name__)


def parse_package_tokens(tokens: List[str]) -> Tuple[List[str], Dict[str, str]]:
    """Split CLI tokens into package names and required ranges.

    Args:
        tokens: Tokens such as ``lodash``, ``lodash@^4.0.0`` or ``@types/node@18``.

    Returns:
        tuple: Ordered names and a name -> range mapping for tokens that carry one.
    """
    names = []
    versions = {}
    for token in tokens:
        name, spec = tokenize_rightmost_at(token)
        names.append(name)
        if spec:
            versions[name] = spec
    return names, versions


def _setup_logging(args) -> None:
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()
    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        add_file_handler(log_file)
        logger.info("Logging to file: %s", log_file)


def run(args) -> int:
    """Execute the parsed command and return an exit code."""
    try:
        config = load_config(getattr(args, "CONFIG", None), getattr(args, "CWD", None))
        options = build_options(args, config)
        names, token_versions = parse_package_tokens(args.PACKAGES)

        if args.action == "uninstall":
            uninstall(names, options)
            return ExitCodes.SUCCESS.value

        options.versions = {**(options.versions or {}), **token_versions}
        if args.action == "check":
            plan = plan_install(names, options)
            if plan.is_empty:
                print("All packages are satisfied.")
            else:
                print(f"Would install {listify(plan.packages)}")
                print(f"  {plan.command}")
            return ExitCodes.SUCCESS.value

        install(names, options)
        return ExitCodes.SUCCESS.value

    except ConfigurationError as e:
        logger.error("%s", e)
        return ExitCodes.CONFIGURATION_ERROR.value
    except ExecutionError as e:
        logger.error("%s", e)
        return ExitCodes.EXECUTION_ERROR.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)
    logger.debug("Arguments parsed.")
    sys.exit(run(args))


if __name__ == "__main__":
    main()
