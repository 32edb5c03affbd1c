# ruff: noqa
"""
Crowdin API Usage Examples

This example lists projects and their branches, then renames a branch with
a patch operation.

Prerequisites:
- Set CROWDIN_TOKEN environment variable (or put it in a .env file)
- Optionally set CROWDIN_ORGANIZATION for Crowdin Enterprise
- Optionally set CROWDIN_PROJECT_ID to work on a specific project
"""

import asyncio
import os

from crowdin_api.config.settings import CrowdinSettings
from crowdin_api.exceptions.crowdin_exceptions import APIError
from crowdin_api.models.crowdin.projects import ProjectsListOptions
from crowdin_api.sources.client.crowdin.crowdin import CrowdinClient, CrowdinTokenConfig
from crowdin_api.sources.client.crowdin.patch import PatchOperation
from crowdin_api.sources.external.crowdin.crowdin import CrowdinDataSource
from crowdin_api.utils.logger import create_logger


async def main() -> None:
    settings = CrowdinSettings.from_env()
    logger = create_logger("crowdin.example", settings.log_level)

    config = CrowdinTokenConfig(
        token=settings.token,
        organization=settings.organization,
        timeout=settings.timeout or 30,
    )
    try:
        client = await CrowdinClient.build_and_validate(config)
    except ValueError as e:
        print("Error: Failed to initialize Crowdin client.")
        print(f"Details: {e}")
        return

    async with CrowdinDataSource(client) as crowdin:
        user, _ = await crowdin.users.get_authenticated()
        logger.info(f"Authenticated as {user.username}")

        # Only projects the user manages
        projects, resp = await crowdin.projects.list(ProjectsListOptions(has_manager_access=1, limit=10))
        logger.info(f"{len(projects)} of {resp.pagination.total if resp.pagination else '?'} projects")
        for project in projects:
            print(f"  {project.id}  {project.name}")

        project_id = int(os.getenv("CROWDIN_PROJECT_ID", projects[0].id if projects else 0))
        if not project_id:
            return

        branches, _ = await crowdin.branches.list(project_id)
        for branch in branches:
            print(f"  branch {branch.id}  {branch.name}")

        if branches:
            try:
                branch, _ = await crowdin.branches.edit(
                    project_id,
                    branches[0].id,
                    [PatchOperation.replace("/title", f"{branches[0].name} (reviewed)")],
                )
                print(f"Renamed branch title to {branch.title!r}")
            except APIError as e:
                print(f"Edit failed with {e.status_code}: {e}")


if __name__ == "__main__":
    asyncio.run(main())
