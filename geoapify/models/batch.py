from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, model_validator

from geoapify.models.common import Address


class BatchJob(BaseModel):
    """Returned when a batch job is submitted."""

    id: str
    status: str
    url: Optional[str] = None


class BatchPending(BaseModel):
    """The job is still running; poll again later."""

    id: Optional[str] = None
    status: Optional[str] = None


class BatchComplete(BaseModel):
    """The job finished; the API answered with the result array."""

    results: List[Address] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _wrap_array(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"results": data}
        return data


def _batch_kind(payload: Any) -> str:
    # An array payload ("[" first) is the finished result set
    if isinstance(payload, (list, BatchComplete)):
        return "complete"
    return "pending"


BatchResult = Annotated[
    Union[
        Annotated[BatchComplete, Tag("complete")],
        Annotated[BatchPending, Tag("pending")],
    ],
    Discriminator(_batch_kind),
]
