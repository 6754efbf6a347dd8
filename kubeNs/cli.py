# kubeNs/cli.py
"""
Command line entry point.

    kubens ns                     # interactively select the namespace to switch to
    kubens ns --batch-mode        # view the current namespace
    kubens ns cheese              # change the current namespace to 'cheese'
    kubens ns --create brie       # change to 'brie', creating it if necessary
    kubens plugins                # list the default plugin versions
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional

from kubeNs import __version__
from kubeNs.constants import EXIT_ERROR, EXIT_INTERRUPTED, EXIT_OK, LOG_FORMAT
from kubeNs.core.k8s_api import KubernetesNamespaceDirectory
from kubeNs.core.kubeconfig import KubeconfigStore
from kubeNs.errors import KubeNsError
from kubeNs.namespace import ConsolePicker, NamespaceCommand, RunRequest
from kubeNs.plugins import plugins_table
from kubeNs.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubens",
        description="View or change the current namespace context in the current Kubernetes cluster",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--kubeconfig", help="Path to the kubeconfig file to read and update")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    ns_parser = subparsers.add_parser(
        "namespace",
        aliases=["ns"],
        help="View or change the current namespace",
        description="Displays or changes the current namespace.",
    )
    ns_parser.add_argument("namespace", nargs="?", default="", help="The namespace to switch to")
    ns_parser.add_argument("-c", "--create", action="store_true",
                           help="Creates the specified namespace if it does not exist")
    ns_parser.add_argument("-q", "--quiet", action="store_true",
                           help="Do not fail if the namespace does not exist")
    ns_parser.add_argument("-b", "--batch-mode", action="store_true", help="Enables batch mode")
    ns_parser.set_defaults(handler=_run_namespace)

    plugins_parser = subparsers.add_parser("plugins", help="List the default plugin versions")
    plugins_parser.set_defaults(handler=_run_plugins)

    return parser


def build_namespace_command(settings: Settings) -> NamespaceCommand:
    return NamespaceCommand(
        store=KubeconfigStore(settings.kubeconfig_path),
        directory=KubernetesNamespaceDirectory(kubeconfig_path=settings.kubeconfig_path),
        picker=ConsolePicker(),
        incluster_namespace_file=settings.incluster_namespace_file,
    )


def _run_namespace(args, settings: Settings, command_factory) -> int:
    request = RunRequest.from_args(
        [args.namespace] if args.namespace else [],
        create=args.create,
        quiet=args.quiet,
        batch_mode=args.batch_mode,
    )
    result = command_factory(settings).run(request)
    logger.debug(f"Report: {result.report.message}")
    print(result.report)
    return EXIT_OK


def _run_plugins(args, settings: Settings, command_factory) -> int:
    print(plugins_table())
    return EXIT_OK


def main(argv: Optional[List[str]] = None,
         command_factory: Callable[[Settings], NamespaceCommand] = build_namespace_command) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(kubeconfig_path=args.kubeconfig, log_level=args.log_level)

    logging.basicConfig(level=settings.log_level_value, format=LOG_FORMAT)

    try:
        return args.handler(args, settings, command_factory)
    except KubeNsError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
