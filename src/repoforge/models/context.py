"""Typed state shared between the steps of one wizard session."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from repoforge.models.git import Account


class WizardContext(BaseModel):
    """Values passed into and out of the repository step."""

    model_config = ConfigDict(validate_assignment=True)

    account: Optional[Account] = Field(
        default=None, description="Account set up by an earlier step"
    )
    clone_url: Optional[str] = Field(
        default=None, description="Clone URL of the repository created by this session"
    )
    project_name: Optional[str] = Field(
        default=None, description="Name of the project being generated"
    )
    project_directory: Optional[Path] = Field(
        default=None, description="Directory holding the generated project"
    )
    user_token: Optional[str] = Field(
        default=None, repr=False, description="Session bearer token for the identity broker"
    )
