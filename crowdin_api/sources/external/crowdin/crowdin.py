from crowdin_api.sources.client.crowdin.crowdin import CrowdinClient
from crowdin_api.sources.external.crowdin.applications import ApplicationsService
from crowdin_api.sources.external.crowdin.branches import BranchesService
from crowdin_api.sources.external.crowdin.fields import FieldsService
from crowdin_api.sources.external.crowdin.labels import LabelsService
from crowdin_api.sources.external.crowdin.projects import ProjectsService
from crowdin_api.sources.external.crowdin.storage import StorageService
from crowdin_api.sources.external.crowdin.string_corrections import StringCorrectionsService
from crowdin_api.sources.external.crowdin.teams import TeamsService
from crowdin_api.sources.external.crowdin.translations import TranslationsService
from crowdin_api.sources.external.crowdin.users import UsersService
from crowdin_api.sources.external.crowdin.webhooks import WebhooksService


class CrowdinDataSource:
    """Crowdin API v2, one attribute per resource.

    Every service shares the REST client of the given CrowdinClient, so
    they all use one connection pool, one base URL and one token.

    Usage:
        client = CrowdinClient.build_from_env()
        crowdin = CrowdinDataSource(client)
        projects, resp = await crowdin.projects.list()
    """

    def __init__(self, client: CrowdinClient) -> None:
        self._client = client.get_client()
        if self._client is None:
            raise ValueError("HTTP client is not initialized")
        self.base_url = self._client.get_base_url()

        self.applications = ApplicationsService(self._client)
        self.branches = BranchesService(self._client)
        self.fields = FieldsService(self._client)
        self.labels = LabelsService(self._client)
        self.projects = ProjectsService(self._client)
        self.storage = StorageService(self._client)
        self.string_corrections = StringCorrectionsService(self._client)
        self.teams = TeamsService(self._client)
        self.translations = TranslationsService(self._client)
        self.users = UsersService(self._client)
        self.webhooks = WebhooksService(self._client)

    def get_data_source(self) -> "CrowdinDataSource":
        return self

    async def close(self) -> None:
        """Close the shared HTTP connection pool"""
        await self._client.close()

    async def __aenter__(self) -> "CrowdinDataSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
