"""
Protobuf message classes for the People gRPC service.

The descriptors mirror ``people.proto`` and are registered in a private
descriptor pool when this module is imported, so the service works
without a ``protoc`` build step.  The module also converts between the
protobuf ``Person`` message and the pydantic :class:`Person` schema
used by the rest of the application.

proto3 does not serialize default values, so a stored record with
``id`` 0 and no other fields encodes to the same empty message the
lenient not-found reply uses, and a client cannot tell the two apart;
deployments whose data uses id 0 should enable ``STRICT_NOT_FOUND`` on
the server and ``strict_not_found`` on :class:`PeopleRpcClient`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from people_service.app.schemas.person import Person


PACKAGE = "people"
SERVICE_NAME = f"{PACKAGE}.People"

_FIELD = descriptor_pb2.FieldDescriptorProto

# (name, number, type) of the scalar fields of ``people.Person``.
_PERSON_SCALARS = (
    ("id", 1, _FIELD.TYPE_INT32),
    ("first_name", 2, _FIELD.TYPE_STRING),
    ("last_name", 3, _FIELD.TYPE_STRING),
    ("bio", 4, _FIELD.TYPE_STRING),
    ("photo_url", 5, _FIELD.TYPE_STRING),
)
_TEXT_FIELDS = ("first_name", "last_name", "bio", "photo_url")


def _add_field(message, name: str, number: int, field_type: int, *, repeated: bool = False, type_name: Optional[str] = None):
    field = message.field.add(
        name=name,
        number=number,
        type=field_type,
        label=_FIELD.LABEL_REPEATED if repeated else _FIELD.LABEL_OPTIONAL,
        json_name=_json_name(name),
    )
    if type_name:
        field.type_name = type_name
    return field


def _json_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="people_service/people.proto",
        package=PACKAGE,
        syntax="proto3",
    )

    file_proto.message_type.add(name="GetAllPeopleRequest")

    by_id = file_proto.message_type.add(name="GetPersonByIdRequest")
    _add_field(by_id, "id", 1, _FIELD.TYPE_INT32)

    person = file_proto.message_type.add(name="Person")
    for name, number, field_type in _PERSON_SCALARS:
        _add_field(person, name, number, field_type)
    # map<string, string> is encoded as a repeated nested entry message.
    entry = person.nested_type.add(name="AttributesEntry")
    entry.options.map_entry = True
    _add_field(entry, "key", 1, _FIELD.TYPE_STRING)
    _add_field(entry, "value", 2, _FIELD.TYPE_STRING)
    _add_field(
        person,
        "attributes",
        6,
        _FIELD.TYPE_MESSAGE,
        repeated=True,
        type_name=f".{PACKAGE}.Person.AttributesEntry",
    )

    reply = file_proto.message_type.add(name="PeopleReply")
    _add_field(reply, "people", 1, _FIELD.TYPE_MESSAGE, repeated=True, type_name=f".{PACKAGE}.Person")

    service = file_proto.service.add(name="People")
    service.method.add(
        name="GetAll",
        input_type=f".{PACKAGE}.GetAllPeopleRequest",
        output_type=f".{PACKAGE}.PeopleReply",
    )
    service.method.add(
        name="GetPersonById",
        input_type=f".{PACKAGE}.GetPersonByIdRequest",
        output_type=f".{PACKAGE}.Person",
    )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.{name}"))


GetAllPeopleRequest = _message_class("GetAllPeopleRequest")
GetPersonByIdRequest = _message_class("GetPersonByIdRequest")
PersonMessage = _message_class("Person")
PeopleReply = _message_class("PeopleReply")


def _attribute_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def person_to_message(person: Person):
    """Convert a :class:`Person` into a ``people.Person`` message.

    Missing text fields become empty strings, extra fields of the
    record go into ``attributes`` (non-string values JSON-encoded).
    """
    message = PersonMessage(id=person.id)
    for name in _TEXT_FIELDS:
        value = getattr(person, name)
        if value is not None:
            setattr(message, name, value)
    for key, value in person.extra_fields.items():
        message.attributes[key] = _attribute_value(value)
    return message


def message_to_person(message) -> Person:
    """Convert a ``people.Person`` message back into a :class:`Person`."""
    data: Dict[str, Any] = {"id": message.id}
    for name in _TEXT_FIELDS:
        value = getattr(message, name)
        data[name] = value or None
    data.update(dict(message.attributes))
    return Person.model_validate(data)


def is_empty_person(message) -> bool:
    """True for the default ``Person`` sent when a lookup found nothing.

    Also true for a record holding only ``id`` 0, see the module notes.
    """
    return message.ByteSize() == 0
