"""HTTP client for the wizard's external collaborators.

Covers the draft, template and client stores and the AI generate, edit and
fix endpoints. Calls are synchronous, with a timeout and without retries.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from ..models.compensation import CompensationConfig
from ..models.fields import ClientRecord, TemplateRecord
from .exceptions import CollaboratorError


logger = logging.getLogger(__name__)

API_URL_ENV = "CONTRACT_WIZARD_API_URL"
DEFAULT_API_URL = "http://127.0.0.1:3000/api"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class GenerationResult:
    """Answer of the AI generate endpoint."""
    success: bool
    title: str = ""
    content: str = ""
    needs_more_info: bool = False
    questions: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EditResult:
    """Answer of the AI edit endpoint."""
    success: bool
    modified_content: str = ""
    message: str = ""


class ContractApiClient:
    """
    Client for the draft, template, client and AI endpoints.

    Non-2xx responses, unreachable services and bodies that are not JSON
    raise ``CollaboratorError``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or os.getenv(API_URL_ENV) or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    # =========================================================================
    # Transport
    # =========================================================================

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                json=payload,
                params=params,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        except requests.Timeout as e:
            raise CollaboratorError(
                f"Request timed out after {self.timeout}s: {e}", endpoint=path
            ) from e
        except requests.RequestException as e:
            raise CollaboratorError(f"Cannot reach {url}: {e}", endpoint=path) from e

        if not 200 <= response.status_code < 300:
            raise CollaboratorError(
                self._error_detail(response),
                status_code=response.status_code,
                endpoint=path,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise CollaboratorError(
                f"Invalid JSON in response: {e}",
                status_code=response.status_code,
                endpoint=path,
            ) from e
        if not isinstance(body, dict):
            raise CollaboratorError(
                "Expected a JSON object in response",
                status_code=response.status_code,
                endpoint=path,
            )
        logger.debug(f"{method} {path} -> {response.status_code}")
        return body

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(body, dict):
            for key in ("error", "message", "detail"):
                if body.get(key):
                    return str(body[key])
        return str(body)

    def _get_optional(self, path: str) -> Optional[Dict[str, Any]]:
        """GET that maps 404 to None."""
        try:
            return self._request("GET", path)
        except CollaboratorError as e:
            if e.is_not_found:
                return None
            raise

    # =========================================================================
    # Drafts
    # =========================================================================

    def save_draft(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create or update a draft; returns the stored draft."""
        body = self._request("POST", "/drafts", payload=payload)
        draft = body.get("draft") or {}
        logger.info(f"Saved draft {draft.get('id')}")
        return draft

    def get_draft(self, draft_id: str) -> Optional[Dict[str, Any]]:
        body = self._get_optional(f"/drafts/{draft_id}")
        if body is None:
            return None
        return body.get("draft")

    def delete_draft(self, draft_id: str) -> None:
        self._request("DELETE", "/drafts", params={"id": draft_id})

    # =========================================================================
    # Templates and clients
    # =========================================================================

    def list_templates(self) -> List[TemplateRecord]:
        body = self._request("GET", "/templates")
        return [TemplateRecord.from_dict(t) for t in body.get("templates") or []]

    def get_default_templates(self) -> List[TemplateRecord]:
        body = self._request("GET", "/templates/default")
        if body.get("success") is False:
            raise CollaboratorError(
                body.get("message") or "Failed to fetch default templates",
                endpoint="/templates/default",
            )
        return [TemplateRecord.from_dict(t) for t in body.get("templates") or []]

    def get_template(self, template_id: str) -> Optional[TemplateRecord]:
        body = self._get_optional(f"/templates/{template_id}")
        if not body or not body.get("template"):
            return None
        return TemplateRecord.from_dict(body["template"])

    def list_clients(self) -> List[ClientRecord]:
        body = self._request("GET", "/clients")
        return [ClientRecord.from_dict(c) for c in body.get("clients") or []]

    def get_client(self, client_id: str) -> Optional[ClientRecord]:
        body = self._get_optional(f"/clients/{client_id}")
        if not body or not body.get("client"):
            return None
        return ClientRecord.from_dict(body["client"])

    # =========================================================================
    # AI
    # =========================================================================

    def generate_contract(
        self,
        description: str,
        contract_type: Optional[str] = None,
        additional_details: Optional[str] = None,
    ) -> GenerationResult:
        """Ask the AI service for a contract, or for follow-up questions."""
        payload: Dict[str, Any] = {"description": description}
        if contract_type:
            payload["contractType"] = contract_type
        if additional_details:
            payload["additionalDetails"] = additional_details

        body = self._request("POST", "/ai/generate-contract", payload=payload)
        if body.get("needsMoreInfo"):
            return GenerationResult(
                success=False,
                needs_more_info=True,
                questions=list(body.get("questions") or []),
            )
        contract = body.get("contract") or {}
        return GenerationResult(
            success=bool(body.get("success")),
            title=contract.get("title", ""),
            content=contract.get("content", ""),
        )

    def edit_contract(
        self,
        current_content: str,
        user_message: str,
        conversation_history: Optional[List[Dict[str, str]]] = None,
    ) -> EditResult:
        body = self._request(
            "POST",
            "/ai/edit-contract",
            payload={
                "currentContent": current_content,
                "userMessage": user_message,
                "conversationHistory": conversation_history or [],
            },
        )
        return EditResult(
            success=bool(body.get("success")),
            modified_content=body.get("modifiedContent") or "",
            message=body.get("message") or "",
        )

    def fix_contract(
        self,
        content: str,
        compensation: Optional[CompensationConfig] = None,
    ) -> str:
        """Have the AI service fix the contract; returns the fixed content."""
        body = self._request(
            "POST",
            "/ai/fix-contract",
            payload={
                "contractContent": content,
                "compensationData": compensation.to_dict() if compensation else None,
            },
        )
        if not body.get("success"):
            raise CollaboratorError(
                body.get("error") or "Contract fix failed", endpoint="/ai/fix-contract"
            )
        return body.get("fixedContent") or ""
