"""
Protobuf message classes derived from entity schemas.

Each entity declares its message full name and field numbers; this module
turns those declarations into ``FileDescriptorProto``s, registers them in a
private descriptor pool (so they never collide with other cosmos protobuf
packages loaded in the process), and hands out the generated classes.
Field numbers and types follow the upstream cosmos/initia ``.proto``
definitions, so the binary encoding is wire-compatible with a node:
``Int`` travels as decimal text and ``LegacyDec`` as its 10^18-scaled
integer text.
"""

import logging
import threading
from typing import Dict

from google.protobuf import (
    any_pb2,
    descriptor_pb2,
    descriptor_pool,
    duration_pb2,
    message_factory,
    timestamp_pb2,
)

from .errors import UnsupportedConversionError
from .schema import schema_of


logger = logging.getLogger(__name__)

_FieldProto = descriptor_pb2.FieldDescriptorProto

_pool = descriptor_pool.DescriptorPool()
_lock = threading.RLock()
_files: Dict[str, str] = {}      # full name -> file name
_classes: Dict[type, type] = {}  # entity class -> message class


def _add_file(file_proto: descriptor_pb2.FileDescriptorProto) -> None:
    _pool.AddSerializedFile(file_proto.SerializeToString())


def _add_well_known(file_descriptor) -> None:
    file_proto = descriptor_pb2.FileDescriptorProto()
    file_descriptor.CopyToProto(file_proto)
    _add_file(file_proto)
    for message in file_proto.message_type:
        _files[f"{file_proto.package}.{message.name}"] = file_proto.name


_add_well_known(any_pb2.DESCRIPTOR)
_add_well_known(timestamp_pb2.DESCRIPTOR)
_add_well_known(duration_pb2.DESCRIPTOR)


def _file_name(full_name: str) -> str:
    return "initia_models/" + full_name.replace(".", "/") + ".proto"


def _new_file(full_name: str):
    package, _, name = full_name.rpartition(".")
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=_file_name(full_name),
        package=package,
        syntax="proto3",
    )
    return file_proto, name


def _ensure_enum(kind) -> str:
    full_name = kind.proto_name
    if full_name in _files:
        return _files[full_name]

    file_proto, name = _new_file(full_name)
    enum_proto = file_proto.enum_type.add(name=name)
    for member in kind.enum_cls:
        enum_proto.value.add(name=member.name, number=int(member))

    _add_file(file_proto)
    _files[full_name] = file_proto.name
    logger.debug("Built enum descriptor %s", full_name)
    return file_proto.name


def _ensure_message(entity_cls) -> str:
    full_name = entity_cls.proto_name
    if not full_name:
        raise UnsupportedConversionError(f"{entity_cls.__name__} has no protobuf message")
    if full_name in _files:
        return _files[full_name]

    file_proto, name = _new_file(full_name)
    message_proto = file_proto.message_type.add(name=name)
    dependencies = []

    for f in schema_of(entity_cls):
        field_type, type_name, dependency = f.kind.proto_type()
        field_proto = message_proto.field.add(
            name=f.proto_name,
            number=f.number,
            type=field_type,
            label=_FieldProto.LABEL_REPEATED if f.kind.repeated else _FieldProto.LABEL_OPTIONAL,
        )
        if type_name:
            field_proto.type_name = type_name

        dependency_file = _resolve(dependency)
        if dependency_file and dependency_file not in dependencies:
            dependencies.append(dependency_file)

    file_proto.dependency.extend(dependencies)
    _add_file(file_proto)
    _files[full_name] = file_proto.name
    logger.debug("Built message descriptor %s (%d fields)", full_name, len(message_proto.field))
    return file_proto.name


def _resolve(dependency):
    """Map a kind's dependency (file name, entity class or enum kind) to a file name."""
    if dependency is None:
        return None
    if isinstance(dependency, str):
        return dependency
    if isinstance(dependency, type):
        return _ensure_message(dependency)
    return _ensure_enum(dependency)


def message_class(entity_cls):
    """Return the protobuf message class for an entity class, building it on first use."""
    with _lock:
        cls = _classes.get(entity_cls)
        if cls is None:
            _ensure_message(entity_cls)
            descriptor = _pool.FindMessageTypeByName(entity_cls.proto_name)
            cls = message_factory.GetMessageClass(descriptor)
            _classes[entity_cls] = cls
        return cls
