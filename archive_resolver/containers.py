"""Dependency injection containers for the archive-resolver application."""

from __future__ import annotations

from dependency_injector import containers, providers

from archive_resolver.config import Settings
from archive_resolver.helpers import init_logger
from archive_resolver.services.content_provider import ArchiveContentProvider
from archive_resolver.services.project_lister import WorkspaceProjects
from archive_resolver.services.root_registry import RootRegistry


class AppContainer(containers.DeclarativeContainer):
    """Main application container."""

    config = providers.Singleton(Settings)
    logger = providers.Singleton(
        init_logger,
        "archive_resolver",
        config.provided.log_level,
    )

    root_registry = providers.Singleton(
        RootRegistry,
        logger=logger,
        library_dirs=config.provided.library_dirs,
        source_folders=config.provided.source_folders,
        archive_extensions=config.provided.archive_extensions,
    )

    content_provider = providers.Factory(
        ArchiveContentProvider,
        root_resolver=root_registry,
        logger=logger,
    )

    workspace_projects = providers.Singleton(
        WorkspaceProjects,
        logger=logger,
        workspace_dir=config.provided.workspace_dir,
    )
