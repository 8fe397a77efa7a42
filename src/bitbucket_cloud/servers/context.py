from dataclasses import dataclass, field

from bitbucket_cloud.context import WorkflowContext


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding state shared by every tool call of a server run.
    """

    read_only: bool = False
    workflow_context: WorkflowContext = field(default_factory=WorkflowContext)
