"""HTTP client for the Mailgun REST API.

Thin synchronous transport over httpx. Each method renders its payload
through the request models and returns the raw ``httpx.Response``; status
codes are left for the caller to interpret.

Features:
- Basic auth ("api", key) against a configurable API root
- Form, multipart and JSON bodies built from the request models
- Transport failures wrapped in MailgunClientError with transient detection

Not handled here: retries, pagination, response parsing.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

import httpx

from mailgun_client.config import MailgunConfig
from mailgun_client.core.encoders import require_text, to_yes_no
from mailgun_client.core.exceptions import MailgunClientError, OutOfRangeError
from mailgun_client.core.logger import get_logger, log_context
from mailgun_client.models.address import (
    EmailAddress,
    coerce_address,
    parse_hostname,
    validate_ipv4,
)
from mailgun_client.models.domains import (
    DomainCredentialRequest,
    DomainRequest,
    validate_credential_password,
)
from mailgun_client.models.enums import (
    ClickTrackingMode,
    WebhookType,
    get_click_tracking_name,
    get_webhook_type_name,
)
from mailgun_client.models.events import EventRequest
from mailgun_client.models.mailing_lists import MailingList, Member
from mailgun_client.models.messages import Message
from mailgun_client.models.payload import FormContent, RequestModel, form_to_json
from mailgun_client.models.query_string import QueryStringBuilder
from mailgun_client.models.routes import Route
from mailgun_client.models.stats import StatsRequest
from mailgun_client.models.suppressions import (
    BounceRequest,
    ComplaintRequest,
    UnsubscriberRequest,
)
from mailgun_client.models.webhooks import Webhook

logger = get_logger(__name__)

MAX_LISTING_LIMIT = 10_000
MAX_BATCH_SIZE = 1000
DEFAULT_LISTING_LIMIT = 100
DEFAULT_BASE_URL = "https://api.mailgun.net/v3/"
DEFAULT_TIMEOUT = 30


def _path_segment(value: str) -> str:
    return quote(value, safe="@")


def _listing_query(limit: int, skip: int | None = None) -> str:
    if limit < 1 or limit > MAX_LISTING_LIMIT:
        raise OutOfRangeError(
            f"Limit must be between 1 and {MAX_LISTING_LIMIT:,}!", field="limit"
        )
    query = QueryStringBuilder().append("limit", limit)
    if skip:
        if skip < 0:
            raise OutOfRangeError("Skip cannot be negative!", field="skip")
        query.append("skip", skip)
    return query.build()


def _batch_json(items: Iterable[RequestModel], field: str) -> list[dict[str, Any]]:
    batch = [item.to_json() for item in items]
    if not batch:
        raise OutOfRangeError(f"{field} cannot be empty!", field=field)
    if len(batch) > MAX_BATCH_SIZE:
        raise OutOfRangeError(
            f"Cannot send more than {MAX_BATCH_SIZE:,} {field} in one batch!", field=field
        )
    return batch


def _form(content: FormContent) -> dict[str, Any]:
    # httpx wants a mapping; repeated keys become lists
    return form_to_json(content)


class MailgunClient:
    """Mailgun API client.

    Domain-scoped endpoints act on the domain given at construction.
    ``httpx.Client`` is safe to share between threads, so one instance can
    serve a whole application.

    Attributes:
        domain: Sending domain.
        base_url: API root, e.g. ``https://api.mailgun.net/v3/``.
        timeout: Request timeout in seconds.

    Example:
        with MailgunClient() as client:
            response = client.send_message(message)
            response.raise_for_status()
    """

    def __init__(
        self,
        api_key: str | None = None,
        domain: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        config: MailgunConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize Mailgun client.

        Args:
            api_key: Private API key (uses MailgunConfig if None).
            domain: Sending domain (uses MailgunConfig if None).
            base_url: API root override.
            timeout: Timeout override in seconds.
            config: Settings to read missing values from.
            transport: httpx transport, e.g. ``httpx.MockTransport`` in tests.

        Raises:
            MailgunConfigError: If key or domain is missing from the settings.
            MalformedInputError: If domain is not a valid hostname.
        """
        if api_key is None or domain is None:
            config = config or MailgunConfig()
            config.validate_client_config()
            config_dict = config.get_client_config()
            api_key = api_key if api_key is not None else str(config_dict["api_key"])
            domain = domain if domain is not None else str(config_dict["domain"])
            base_url = base_url or str(config_dict["base_url"])
            timeout = timeout or int(config_dict["timeout"])

        require_text(api_key, "api_key", "API key")
        self.domain = parse_hostname(domain, field="domain")
        self.base_url = base_url or DEFAULT_BASE_URL
        self.timeout = timeout or DEFAULT_TIMEOUT

        self._client = httpx.Client(
            base_url=self.base_url,
            auth=("api", api_key),
            timeout=self.timeout,
            transport=transport,
        )

        logger.info(f"Mailgun Client initialized: {self.base_url} ({self.domain})")

    # ========================================================================
    # Transport
    # ========================================================================
    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        target: str | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Issue one request and return the raw response.

        Raises:
            MailgunClientError: If no response was received.
        """
        context = log_context(operation, domain=self.domain, target=target)
        logger.info(f"Request: {context}")

        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Request failed: {context} - {e}")
            raise MailgunClientError(
                f"{operation} failed: {e}",
                is_transient=self._is_transient_error(e),
            ) from e

        logger.debug(f"Response: {context} - HTTP {response.status_code}")
        return response

    def _domain_path(self, *segments: str) -> str:
        return "/".join([self.domain, *segments])

    # ========================================================================
    # Messages, events, stats
    # ========================================================================
    def send_message(self, message: Message) -> httpx.Response:
        """Send a message, as multipart when it carries attachments.

        Raises:
            MissingRequiredFieldError: If sender or recipients are missing.
            OutOfRangeError: If recipient cap or variable parity is violated.
            MailgunClientError: If the request fails in transport.
        """
        data = _form(message.as_key_value_collection())
        files = list(message.iter_files())

        return self._request(
            "POST",
            self._domain_path("messages"),
            "send_message",
            target=f"{len(message.to)} recipients",
            data=data,
            files=files or None,
        )

    def get_events(self, request: EventRequest) -> httpx.Response:
        return self._request(
            "GET", self._domain_path("events") + request.to_query_string(), "get_events"
        )

    def get_stats(self, request: StatsRequest) -> httpx.Response:
        return self._request(
            "GET",
            self._domain_path("stats", "total") + "?" + request.to_query_string(),
            "get_stats",
        )

    # ========================================================================
    # Domains
    # ========================================================================
    def get_domains(self, limit: int = DEFAULT_LISTING_LIMIT, skip: int = 0) -> httpx.Response:
        return self._request("GET", "domains" + _listing_query(limit, skip), "get_domains")

    def get_domain(self, name: str) -> httpx.Response:
        name = parse_hostname(name)
        return self._request("GET", f"domains/{name}", "get_domain", target=name)

    def add_domain(self, request: DomainRequest) -> httpx.Response:
        return self._request(
            "POST",
            "domains",
            "add_domain",
            target=request.name,
            data=_form(request.to_form_content()),
        )

    def delete_domain(self, name: str) -> httpx.Response:
        name = parse_hostname(name)
        return self._request("DELETE", f"domains/{name}", "delete_domain", target=name)

    def add_credential(self, credential: DomainCredentialRequest) -> httpx.Response:
        return self._request(
            "POST",
            f"domains/{self.domain}/credentials",
            "add_credential",
            target=credential.username,
            data=_form(credential.to_form_content()),
        )

    def update_credential_password(self, username: str, password: str) -> httpx.Response:
        """Change the password of an existing SMTP credential.

        Raises:
            MissingRequiredFieldError: If username or password is blank.
            OutOfRangeError: If password length is outside [5, 32].
        """
        require_text(username, "username", "Username")
        password = validate_credential_password(password)
        return self._request(
            "PUT",
            f"domains/{self.domain}/credentials/{_path_segment(username)}",
            "update_credential_password",
            target=username,
            data={"password": password},
        )

    def delete_credential(self, username: str) -> httpx.Response:
        require_text(username, "username", "Username")
        return self._request(
            "DELETE",
            f"domains/{self.domain}/credentials/{_path_segment(username)}",
            "delete_credential",
            target=username,
        )

    def update_click_tracking(self, mode: ClickTrackingMode) -> httpx.Response:
        return self._request(
            "PUT",
            f"domains/{self.domain}/tracking/click",
            "update_click_tracking",
            data={"active": get_click_tracking_name(mode)},
        )

    # ========================================================================
    # IPs
    # ========================================================================
    def get_ips(self, dedicated_only: bool = False) -> httpx.Response:
        query = QueryStringBuilder().append("dedicated", to_yes_no(dedicated_only)).build()
        return self._request("GET", "ips" + query, "get_ips")

    def add_ip(self, ip: str) -> httpx.Response:
        ip = validate_ipv4(ip)
        return self._request(
            "POST", f"domains/{self.domain}/ips", "add_ip", target=ip, data={"ip": ip}
        )

    def delete_ip(self, ip: str) -> httpx.Response:
        ip = validate_ipv4(ip)
        return self._request("DELETE", f"domains/{self.domain}/ips/{ip}", "delete_ip", target=ip)

    # ========================================================================
    # Suppressions
    # ========================================================================
    def get_bounces(self, limit: int = DEFAULT_LISTING_LIMIT) -> httpx.Response:
        return self._request(
            "GET", self._domain_path("bounces") + _listing_query(limit), "get_bounces"
        )

    def add_bounce(self, bounce: BounceRequest) -> httpx.Response:
        return self._request(
            "POST",
            self._domain_path("bounces"),
            "add_bounce",
            target=bounce.address.address,
            data=_form(bounce.to_form_content()),
        )

    def add_bounces(self, bounces: Iterable[BounceRequest]) -> httpx.Response:
        """Add up to 1000 bounces in one JSON request.

        Raises:
            OutOfRangeError: If the batch is empty or larger than 1000.
        """
        batch = _batch_json(bounces, "bounces")
        return self._request(
            "POST",
            self._domain_path("bounces"),
            "add_bounces",
            target=f"{len(batch)} addresses",
            json=batch,
        )

    def delete_bounce(self, address: EmailAddress | str) -> httpx.Response:
        address = coerce_address(address).address
        return self._request(
            "DELETE",
            self._domain_path("bounces", _path_segment(address)),
            "delete_bounce",
            target=address,
        )

    def get_complaints(self, limit: int = DEFAULT_LISTING_LIMIT) -> httpx.Response:
        return self._request(
            "GET", self._domain_path("complaints") + _listing_query(limit), "get_complaints"
        )

    def add_complaint(self, complaint: ComplaintRequest) -> httpx.Response:
        return self._request(
            "POST",
            self._domain_path("complaints"),
            "add_complaint",
            target=complaint.address.address,
            data=_form(complaint.to_form_content()),
        )

    def add_complaints(self, complaints: Iterable[ComplaintRequest]) -> httpx.Response:
        batch = _batch_json(complaints, "complaints")
        return self._request(
            "POST",
            self._domain_path("complaints"),
            "add_complaints",
            target=f"{len(batch)} addresses",
            json=batch,
        )

    def get_unsubscribers(self, limit: int = DEFAULT_LISTING_LIMIT) -> httpx.Response:
        return self._request(
            "GET",
            self._domain_path("unsubscribes") + _listing_query(limit),
            "get_unsubscribers",
        )

    def add_unsubscriber(self, unsubscriber: UnsubscriberRequest) -> httpx.Response:
        return self._request(
            "POST",
            self._domain_path("unsubscribes"),
            "add_unsubscriber",
            target=unsubscriber.address.address,
            data=_form(unsubscriber.to_form_content()),
        )

    def add_unsubscribers(self, unsubscribers: Iterable[UnsubscriberRequest]) -> httpx.Response:
        batch = _batch_json(unsubscribers, "unsubscribers")
        return self._request(
            "POST",
            self._domain_path("unsubscribes"),
            "add_unsubscribers",
            target=f"{len(batch)} addresses",
            json=batch,
        )

    def delete_unsubscriber(
        self, address: EmailAddress | str, tag: str | None = None
    ) -> httpx.Response:
        """Remove an address from the unsubscribe list, or from one tag only."""
        address = coerce_address(address).address
        path = self._domain_path("unsubscribes", _path_segment(address))
        if tag is not None:
            path += QueryStringBuilder().append("tag", require_text(tag, "tag", "Tag")).build()
        return self._request("DELETE", path, "delete_unsubscriber", target=address)

    # ========================================================================
    # Mailing lists
    # ========================================================================
    def get_mailing_lists(self, limit: int = DEFAULT_LISTING_LIMIT) -> httpx.Response:
        return self._request(
            "GET", "lists/pages" + _listing_query(limit), "get_mailing_lists"
        )

    def add_mailing_list(self, mailing_list: MailingList) -> httpx.Response:
        return self._request(
            "POST",
            "lists",
            "add_mailing_list",
            target=mailing_list.address.address,
            data=_form(mailing_list.to_form_content()),
        )

    def update_mailing_list(
        self, address: EmailAddress | str, mailing_list: MailingList
    ) -> httpx.Response:
        address = coerce_address(address).address
        return self._request(
            "PUT",
            f"lists/{_path_segment(address)}",
            "update_mailing_list",
            target=address,
            data=_form(mailing_list.to_form_content()),
        )

    def delete_mailing_list(self, address: EmailAddress | str) -> httpx.Response:
        address = coerce_address(address).address
        return self._request(
            "DELETE", f"lists/{_path_segment(address)}", "delete_mailing_list", target=address
        )

    def get_mailing_list_members(
        self, address: EmailAddress | str, limit: int = DEFAULT_LISTING_LIMIT
    ) -> httpx.Response:
        address = coerce_address(address).address
        return self._request(
            "GET",
            f"lists/{_path_segment(address)}/members/pages" + _listing_query(limit),
            "get_mailing_list_members",
            target=address,
        )

    def add_mailing_list_member(
        self, address: EmailAddress | str, member: Member
    ) -> httpx.Response:
        address = coerce_address(address).address
        return self._request(
            "POST",
            f"lists/{_path_segment(address)}/members",
            "add_mailing_list_member",
            target=address,
            data=_form(member.to_form_content()),
        )

    def add_mailing_list_members(
        self,
        address: EmailAddress | str,
        members: Iterable[Member],
        upsert: bool = False,
    ) -> httpx.Response:
        """Add up to 1000 members in one request.

        Raises:
            OutOfRangeError: If the batch is empty or larger than 1000.
        """
        address = coerce_address(address).address
        batch = _batch_json(members, "members")
        return self._request(
            "POST",
            f"lists/{_path_segment(address)}/members.json",
            "add_mailing_list_members",
            target=address,
            data={
                "members": json.dumps(batch, separators=(",", ":")),
                "upsert": to_yes_no(upsert),
            },
        )

    # ========================================================================
    # Routes
    # ========================================================================
    def get_routes(self, limit: int = DEFAULT_LISTING_LIMIT, skip: int = 0) -> httpx.Response:
        return self._request("GET", "routes" + _listing_query(limit, skip), "get_routes")

    def create_route(self, route: Route) -> httpx.Response:
        return self._request(
            "POST",
            "routes",
            "create_route",
            target=route.expression,
            data=_form(route.to_form_content()),
        )

    def delete_route(self, route_id: str) -> httpx.Response:
        require_text(route_id, "route_id", "Route id")
        return self._request(
            "DELETE", f"routes/{_path_segment(route_id)}", "delete_route", target=route_id
        )

    # ========================================================================
    # Webhooks
    # ========================================================================
    def get_webhooks(self) -> httpx.Response:
        return self._request("GET", f"domains/{self.domain}/webhooks", "get_webhooks")

    def create_webhook(self, webhook: Webhook) -> httpx.Response:
        return self._request(
            "POST",
            f"domains/{self.domain}/webhooks",
            "create_webhook",
            target=webhook.id,
            data=_form(webhook.to_form_content()),
        )

    def delete_webhook(self, webhook_type: WebhookType) -> httpx.Response:
        name = get_webhook_type_name(webhook_type)
        require_text(name, "webhook_type", "Webhook type")
        return self._request(
            "DELETE", f"domains/{self.domain}/webhooks/{name}", "delete_webhook", target=name
        )

    # ========================================================================
    # Lifecycle
    # ========================================================================
    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()
        logger.debug("Mailgun client closed")

    @staticmethod
    def _is_transient_error(error: Exception) -> bool:
        """Determine if error is temporary (retryable).

        Args:
            error: Exception to analyze.

        Returns:
            True if error is likely transient and retry may succeed.
        """
        if isinstance(error, (httpx.TimeoutException, httpx.NetworkError)):
            return True

        error_str = str(error).lower()
        transient_keywords = [
            "timeout",
            "connection",
            "temporarily",
            "try again",
            "unavailable",
            "refused",
            "reset",
        ]
        return any(keyword in error_str for keyword in transient_keywords)

    def __enter__(self) -> MailgunClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close connection pool."""
        self.close()
