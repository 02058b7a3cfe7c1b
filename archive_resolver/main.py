"""Archive entry content resolver."""
import sys
from argparse import Namespace
from pathlib import Path

from dependency_injector import providers
from dependency_injector.wiring import Provide, inject
from verboselogs import VerboseLogger

from archive_resolver.containers import AppContainer
from archive_resolver.exceptions import ResolverError
from archive_resolver.helpers import init_logger, parse_options, to_json
from archive_resolver.services.content_provider import ArchiveContentProvider
from archive_resolver.services.project_lister import WorkspaceProjects
from archive_resolver.services.root_registry import RootRegistry


@inject
def main(
    args: Namespace,
    logger: VerboseLogger = Provide[AppContainer.logger],
    root_registry: RootRegistry = Provide[AppContainer.root_registry],
    content_provider: ArchiveContentProvider = Provide[AppContainer.content_provider],
    workspace_projects: WorkspaceProjects = Provide[AppContainer.workspace_projects],
) -> int:
    """Program's entrypoint. Returns the process exit code."""
    for library_dir in args.library_dir:
        root_registry.discover(Path(library_dir))
    for folder in args.source_folder:
        root_registry.register_source_folder(Path(folder).as_posix(), folder)

    try:
        match args.command:
            case "content":
                content = content_provider.resolve_content(args.root_id, args.path)

            case "uri":
                content = content_provider.get_content(args.uri)

            case "projects":
                if args.workspace_dir:
                    workspace_projects.scan(Path(args.workspace_dir))
                nodes = workspace_projects.list_projects(args.workspace_uri)
                print(to_json(nodes))
                return 0

            case other:
                logger.error(f"Unknown command {other}")
                return 2

    except ResolverError as err:
        logger.error(f"Failed resolving content: {err}")
        return 1

    if content is None:
        logger.warning("No such entry.")
        return 1

    sys.stdout.write(content)
    return 0


def run(argv: list[str] | None = None) -> int:
    """Console script entrypoint: build the container and dispatch."""
    args = parse_options("Print the content of entries stored in package archives.", argv)

    app_container = AppContainer()
    if args.verbose:
        app_container.logger.override(
            providers.Singleton(init_logger, "archive_resolver", args.verbose)
        )
    app_container.wire(modules=[__name__])
    try:
        return main(args)
    finally:
        app_container.unwire()


if __name__ == "__main__":
    sys.exit(run())
