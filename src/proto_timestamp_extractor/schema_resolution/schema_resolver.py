"""Resolve schema identifiers into payload decoders."""

from __future__ import annotations

import importlib
import json
from collections.abc import Mapping
from typing import Any

from google.protobuf.message import DecodeError as ProtobufDecodeError
from google.protobuf.message import Message as ProtobufMessage

from proto_timestamp_extractor.extraction_errors import DecodeError
from proto_timestamp_extractor.field_navigation.decoded_nodes import (
    MappingDecodedNode,
    ProtobufDecodedNode,
)

from .resolution_outcomes import (
    DecodeCapability,
    DecoderResolution,
    ResolutionFailure,
    ResolvedDecoder,
    SchemaResolutionError,
)


def protobuf_decoder(message_cls: type[ProtobufMessage]) -> DecodeCapability:
    """Wrap a generated protobuf message class as a decode capability."""

    def decode(payload: bytes) -> ProtobufDecodedNode:
        try:
            message = message_cls.FromString(payload)
        except ProtobufDecodeError as exc:
            raise DecodeError(
                f"Unable to decode {message_cls.DESCRIPTOR.full_name} payload: {exc}"
            ) from exc
        return ProtobufDecodedNode(message)

    return decode


def json_decoder(payload: bytes) -> MappingDecodedNode:
    """Decode a UTF-8 JSON object payload."""
    try:
        decoded = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise DecodeError(f"Unable to decode JSON payload: {exc}") from exc
    if not isinstance(decoded, Mapping):
        raise DecodeError("Decoded JSON payload root must be an object.")
    return MappingDecodedNode(decoded)


BUILTIN_DECODERS: Mapping[str, DecodeCapability] = {"json": json_decoder}


class SchemaResolver:
    """Resolve identifiers from a registry, then as importable protobuf classes.

    Importable identifiers take the form ``package.module_pb2.MessageName`` or
    ``package.module_pb2:Outer.Inner`` for nested message types.
    """

    def __init__(
        self,
        decoders: Mapping[str, DecodeCapability] | None = None,
        *,
        allow_imports: bool = True,
    ) -> None:
        self._decoders = dict(BUILTIN_DECODERS if decoders is None else decoders)
        self._allow_imports = allow_imports

    def register(self, identifier: str, decode: DecodeCapability) -> None:
        """Add or replace a named decoder."""
        self._decoders[identifier] = decode

    def resolve(self, identifier: str) -> DecoderResolution:
        registered = self._decoders.get(identifier)
        if registered is not None:
            return ResolvedDecoder(identifier=identifier, decode=registered)
        if not self._allow_imports:
            return ResolutionFailure(
                identifier=identifier,
                error=SchemaResolutionError(f"No decoder registered for '{identifier}'."),
            )
        try:
            message_cls = _import_message_class(identifier)
        except SchemaResolutionError as exc:
            return ResolutionFailure(identifier=identifier, error=exc)
        return ResolvedDecoder(identifier=identifier, decode=protobuf_decoder(message_cls))


def _import_message_class(identifier: str) -> type[ProtobufMessage]:
    module_name, attribute_path = _split_identifier(identifier)
    try:
        module = importlib.import_module(module_name)
    except PermissionError as exc:
        raise SchemaResolutionError(
            f"Access denied while loading protobuf message module '{module_name}'."
        ) from exc
    except (ImportError, TypeError, ValueError) as exc:
        raise SchemaResolutionError(
            f"Unable to load protobuf message module '{module_name}'."
        ) from exc

    candidate: Any = module
    for attribute in attribute_path.split("."):
        candidate = getattr(candidate, attribute, None)
        if candidate is None:
            raise SchemaResolutionError(
                f"Unable to find protobuf message class '{attribute_path}' in '{module_name}'."
            )
    if not isinstance(candidate, type) or not issubclass(candidate, ProtobufMessage):
        raise SchemaResolutionError(
            f"'{identifier}' is not a protobuf message class with a FromString() parser."
        )
    return candidate


def _split_identifier(identifier: str) -> tuple[str, str]:
    if ":" in identifier:
        module_name, _, attribute_path = identifier.partition(":")
    else:
        module_name, _, attribute_path = identifier.rpartition(".")
    segments = (*module_name.split("."), *attribute_path.split("."))
    if not module_name or not attribute_path or not all(segments):
        raise SchemaResolutionError(
            f"Protobuf message class '{identifier}' must look like 'package.module.MessageName'."
        )
    return module_name, attribute_path
