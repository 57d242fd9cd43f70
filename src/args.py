"""Argument parsing functionality for depsync."""

import argparse

from constants import Constants


def _add_scope_args(sub):
    """Flags shared by every subcommand that acts on a dependency scope."""
    scope = sub.add_mutually_exclusive_group()
    scope.add_argument("-D", "--dev",
                       dest="DEV",
                       help="Operate on devDependencies (default)",
                       action="store_const", const=True,
                       default=None)
    scope.add_argument("-P", "--prod",
                       dest="DEV",
                       help="Operate on dependencies",
                       action="store_const", const=False)
    sub.add_argument("--yarn",
                     dest="YARN",
                     help="Use yarn regardless of yarn.lock detection",
                     action="store_const", const=True,
                     default=None)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="depsync",
        description=(
            "depsync - Ensure npm packages are installed and declared"
        ),
        add_help=True,
    )

    parser.add_argument("-C", "--cwd",
                        dest="CWD",
                        help="Project directory (default: current directory)",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help=f"Path to YAML configuration file (default: <project>/{Constants.CONFIG_FILE})",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    subparsers = parser.add_subparsers(dest="action", required=True)

    install_p = subparsers.add_parser("install", help="Install packages that are missing or outdated")
    install_p.add_argument("PACKAGES", nargs="+", help="Packages as name or name@range")
    _add_scope_args(install_p)
    install_p.add_argument("--dry-run",
                           dest="DRY_RUN",
                           help="Show what would be installed without running the package manager",
                           action="store_true")

    uninstall_p = subparsers.add_parser("uninstall", help="Uninstall packages that are declared")
    uninstall_p.add_argument("PACKAGES", nargs="+", help="Package names")
    _add_scope_args(uninstall_p)
    uninstall_p.add_argument("--dry-run",
                             dest="DRY_RUN",
                             help="Show what would be removed without running the package manager",
                             action="store_true")

    check_p = subparsers.add_parser("check", help="List packages that would be installed")
    check_p.add_argument("PACKAGES", nargs="+", help="Packages as name or name@range")
    _add_scope_args(check_p)

    return parser.parse_args(argv)
