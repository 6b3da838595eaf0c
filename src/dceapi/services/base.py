"""Declarative endpoint table shared by all service façades"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..exceptions import ParameterError
from ..models.base import RequestModel
from ..pipeline import AuthenticatedRequestPipeline
from ..transport import RequestDescriptor, RequestOptions


def _parameter_error(error: ValidationError) -> ParameterError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "request"
    return ParameterError(field, first.get("msg", str(error)))


def _option_overrides(
    request: RequestModel, options: RequestOptions | None
) -> dict[str, Any]:
    if options is None:
        return {}
    overrides: dict[str, Any] = {}
    fields = type(request).model_fields
    if options.trade_type is not None and "trade_type" in fields:
        if "trade_type" not in request.model_fields_set:
            overrides["trade_type"] = str(options.trade_type)
    if options.lang is not None and "lang" in fields:
        if "lang" not in request.model_fields_set:
            overrides["lang"] = options.lang
    return overrides


class Endpoint:
    """One exchange endpoint, exposed as an async method on a service

    Calling the method accepts either a request model instance or the
    model's fields as keyword arguments, plus optional RequestOptions:

        await client.market.get_day_quotes(variety_id="m", trade_date="20240102")
    """

    def __init__(
        self,
        path: str,
        response_type: Any,
        request_model: type[RequestModel] | None = None,
        *,
        method: str = "POST",
        fixed: Mapping[str, Any] | None = None,
        doc: str = "",
    ) -> None:
        self.path = path
        self.response_type = response_type
        self.request_model = request_model
        self.method = method
        self.fixed = dict(fixed or {})
        self.doc = doc
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "BaseService | None", owner: type) -> Any:
        if instance is None:
            return self

        endpoint = self

        async def call(
            request: RequestModel | None = None,
            options: RequestOptions | None = None,
            **fields: Any,
        ) -> Any:
            return await instance._call(endpoint, request, options, fields)

        call.__name__ = self.name
        call.__qualname__ = f"{owner.__name__}.{self.name}"
        call.__doc__ = self.doc
        return call

    def build_body(
        self,
        request: RequestModel | None,
        fields: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> dict[str, Any] | None:
        """Validate parameters and produce the JSON body

        trade_type and lang body fields the caller left unset follow the
        RequestOptions, so body and headers agree.

        Raises:
            ParameterError: If parameters are missing or invalid
        """
        model = self.request_model
        if model is None:
            if request is not None or fields:
                raise ParameterError("request", f"{self.name} takes no parameters")
            return None

        if request is None:
            try:
                request = model(**{**fields, **self.fixed})
            except ValidationError as e:
                raise _parameter_error(e) from e
        else:
            if fields:
                raise ParameterError(
                    "request", "pass either a request model or keyword fields, not both"
                )
            if not isinstance(request, model):
                raise ParameterError(
                    "request",
                    f"expected {model.__name__}, got {type(request).__name__}",
                )
            if self.fixed:
                request = request.model_copy(update=self.fixed)

        overrides = _option_overrides(request, options)
        if overrides:
            try:
                request = model.model_validate(
                    {**request.model_dump(exclude_unset=True), **overrides}
                )
            except ValidationError as e:
                raise _parameter_error(e) from e

        return request.to_body()

    def __repr__(self) -> str:
        return f"Endpoint({self.method} {self.path} -> {self.name})"


class BaseService:
    """Base for service façades; all cross-cutting work goes to the pipeline"""

    def __init__(self, pipeline: AuthenticatedRequestPipeline) -> None:
        self._pipeline = pipeline

    @classmethod
    def endpoints(cls) -> dict[str, Endpoint]:
        """Endpoint table of this service, keyed by method name"""
        table: dict[str, Endpoint] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Endpoint):
                    table[name] = value
        return table

    async def _call(
        self,
        endpoint: Endpoint,
        request: RequestModel | None,
        options: RequestOptions | None,
        fields: Mapping[str, Any],
    ) -> Any:
        body = endpoint.build_body(request, fields, options)
        descriptor = RequestDescriptor(
            path=endpoint.path,
            method=endpoint.method,
            body=body,
        )
        return await self._pipeline.execute(
            descriptor, endpoint.response_type, options
        )
