"""Graph events: immutable records of committed graph mutations."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..graph.models import Edge, Node


class AddedNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["added_node"] = "added_node"
    node: Node


class AddedEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["added_edge"] = "added_edge"
    edge: Edge


class RemovedNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["removed_node"] = "removed_node"
    node: Node


class RemovedEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["removed_edge"] = "removed_edge"
    edge: Edge


GraphEvent = Annotated[
    Union[AddedNode, AddedEdge, RemovedNode, RemovedEdge],
    Field(discriminator="kind"),
]
