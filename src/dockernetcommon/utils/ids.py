# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Conversion between NAPI network uuids and docker network ids.

NAPI identifies networks with a uuid, whilst docker expects a 64 character
identifier. To make them compatible the uuid has its dashes removed and is
then doubled up, so that for a docker id `d` the first half of `d` is always
equal to the second half. Any id violating that can't exist.
"""

DOCKER_ID_LENGTH = 64
DOCKER_ID_HALF_LENGTH = DOCKER_ID_LENGTH // 2

# Length of each dash-separated group of a uuid.
_UUID_GROUP_LENGTHS = (8, 4, 4, 4, 12)

# RFC 4515 escapes for the characters that are special in NAPI filters.
_LDAP_ESCAPES = {
    "\\": "\\5c",
    "*": "\\2a",
    "(": "\\28",
    ")": "\\29",
    "\x00": "\\00",
}


def network_uuid_to_docker_id(uuid: str) -> str:
    """Return the docker id for the NAPI network (or pool) `uuid`."""
    short = uuid.replace("-", "")
    return short + short


def short_network_id_to_uuid_prefix(docker_id: str) -> str:
    """Return the (possibly partial) uuid that `docker_id` refers to.

    Only the first half of the docker id is considered. Dashes are inserted
    at the uuid group boundaries reached by the input, so a partial id
    gives back a uuid prefix suitable for a wildcard search.
    """
    short = docker_id[:DOCKER_ID_HALF_LENGTH]
    groups = []
    start = 0
    for length in _UUID_GROUP_LENGTHS:
        group = short[start : start + length]
        if not group:
            break
        groups.append(group)
        start += length
    return "-".join(groups)


def ldap_escape(value: str) -> str:
    """Escape `value` so it matches literally in a NAPI list filter."""
    return "".join(_LDAP_ESCAPES.get(char, char) for char in value)


def is_possible_exact_id(name: str) -> bool:
    """Whether `name` can be the full docker id of an existing network."""
    return (
        len(name) == DOCKER_ID_LENGTH
        and name[:DOCKER_ID_HALF_LENGTH] == name[DOCKER_ID_HALF_LENGTH:]
    )


def is_possible_partial_id(name: str) -> bool:
    """Whether `name` can be a prefix of the docker id of a network.

    Past the first half, the rest of the id must be a prefix of the first
    half, and a complete id is not a partial one.
    """
    if not name:
        return False
    first_half = name[:DOCKER_ID_HALF_LENGTH]
    second_half = name[DOCKER_ID_HALF_LENGTH:]
    if len(second_half) >= DOCKER_ID_HALF_LENGTH:
        return False
    return first_half.startswith(second_half)
