# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from pydantic import BaseModel, ConfigDict


class NapiBaseModel(BaseModel):
    """Base class for the records returned by NAPI.

    NAPI records carry more attributes than the ones we care about; they are
    kept around so that nothing is lost when a record is passed along.
    """

    model_config = ConfigDict(extra="allow")

    uuid: str
    name: str
