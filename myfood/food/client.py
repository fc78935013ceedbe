# -*- coding: utf-8 -*-
"""Food REST API client."""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import settings
from .models import ApiResponse, DeleteFoodRequest, Food, FoodListItem

logger = logging.getLogger(__name__)

FOOD_LIST_API = "/food/api/list"
FOOD_GET_API = "/food/api/get/{key}"
FOOD_DELETE_API = "/food/api/del"

_FoodList = TypeAdapter(List[FoodListItem])


class FoodClientError(Exception):
    """Base class for failed food API calls."""


class FoodTransportError(FoodClientError):
    """The request failed outright (network, HTTP status or unreadable body)."""


class FoodApiError(FoodClientError):
    """The API answered with a non-empty `error` field."""


class FoodRequestError(FoodClientError):
    """The arguments do not make a valid request; nothing was sent."""


class FoodApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.api_timeout,
            follow_redirects=True,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "FoodApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _call(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = self._http.request(method, path, **kwargs)
            resp.raise_for_status()
            payload = ApiResponse.model_validate(resp.json())
        except httpx.HTTPError as exc:
            logger.error("food api %s %s failed: %s", method, path, exc)
            raise FoodTransportError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            logger.error("food api %s %s returned an unreadable body: %s", method, path, exc)
            raise FoodTransportError(f"Invalid response from {path}") from exc

        if payload.error:
            raise FoodApiError(payload.error)
        return payload.data

    def list_foods(self) -> List[FoodListItem]:
        data = self._call("GET", FOOD_LIST_API)
        try:
            return _FoodList.validate_python(data or [])
        except ValidationError as exc:
            raise FoodTransportError(f"Invalid response from {FOOD_LIST_API}") from exc

    def get_food(self, key: str) -> Food:
        path = FOOD_GET_API.format(key=quote(key, safe=""))
        data = self._call("GET", path)
        try:
            return Food.model_validate(data)
        except ValidationError as exc:
            raise FoodTransportError(f"Invalid response from {path}") from exc

    def delete_food(self, key: str) -> None:
        try:
            request = DeleteFoodRequest(key=key)
        except ValidationError as exc:
            raise FoodRequestError("Food key is required") from exc
        self._call("POST", FOOD_DELETE_API, json=request.model_dump())
