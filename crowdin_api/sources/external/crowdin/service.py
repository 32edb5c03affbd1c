from crowdin_api.sources.client.crowdin.crowdin import CrowdinRESTClientViaToken


class CrowdinService:
    """Base for the per-resource services.

    A service holds no state of its own: it builds paths and delegates every
    call to the shared REST client.
    """

    def __init__(self, client: CrowdinRESTClientViaToken) -> None:
        if client is None:
            raise ValueError("Crowdin REST client is not initialized")
        self._client = client
