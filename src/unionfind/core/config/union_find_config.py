# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from typing import Literal

from pydantic import BaseModel, ConfigDict


class UnionFindConfig(BaseModel):
    """Settings for building union finds and running the ufind command."""

    model_config = ConfigDict(frozen=True)

    backend: Literal["hash", "dense"] = "hash"
    extra: Literal["none", "by_rank"] = "by_rank"
    duplicate_policy: Literal["reject", "last_write_wins"] = "reject"
    verbose: bool = False
    silent: bool = False
