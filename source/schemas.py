"""
Схемы данных OpenAI Assistants API (beta, assistants=v1).

Локальные имена полей совпадают с именами на проводе (snake_case),
поэтому псевдонимы нужны только там, где API использует camelCase.
"""
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# Статусы запуска
RUN_COMPLETED = "completed"
RUN_REQUIRES_ACTION = "requires_action"
RUN_FAILED = "failed"
RUN_CANCELLED = "cancelled"
RUN_EXPIRED = "expired"

FAILURE_STATUSES = (RUN_FAILED, RUN_CANCELLED, RUN_EXPIRED)
TERMINAL_STATUSES = (RUN_COMPLETED, RUN_REQUIRES_ACTION) + FAILURE_STATUSES


class Record(BaseModel):
    """Неизменяемая запись; лишние поля ответа игнорируются."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class ListResult(Record, Generic[T]):
    data: List[T]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


# Ассистенты и инструменты

class FunctionParameter(Record):
    type: Optional[str] = None
    description: Optional[str] = None


class FunctionParameters(Record):
    type: Literal["object"] = "object"
    properties: Dict[str, FunctionParameter] = Field(default_factory=dict)
    required: List[str] = Field(default_factory=list)


class FunctionTool(Record):
    name: str
    description: Optional[str] = None
    parameters: FunctionParameters = Field(default_factory=FunctionParameters)


class FunctionToolEnvelope(Record):
    # удалённые ассистенты могут содержать и другие инструменты (retrieval, code_interpreter)
    type: str = "function"
    function: Optional[FunctionTool] = None


class Assistant(Record):
    name: Optional[str] = None
    description: Optional[str] = None
    model: str
    instructions: Optional[str] = None
    tools: List[FunctionToolEnvelope] = Field(default_factory=list)
    id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """
        Тело запроса на создание/обновление.
        `tools` передаётся всегда, `id` опускается, если он не задан.
        """
        exclude = {"id"} if self.id is None else None
        return self.model_dump(mode="json", exclude=exclude)

    def differs_from(self, other: "Assistant") -> bool:
        # список инструментов не сравнивается
        return (
            self.name != other.name
            or self.description != other.description
            or self.instructions != other.instructions
            or self.model != other.model
        )


# Треды и сообщения

class CreateThreadResult(Record):
    id: str


class CreateThreadMessage(Record):
    content: str
    role: Literal["user"] = "user"


class MessageContentText(Record):
    value: str


class MessageContent(Record):
    type: str = "text"
    text: Optional[MessageContentText] = None


class Message(Record):
    id: str
    content: List[MessageContent] = Field(default_factory=list)
    thread_id: str
    role: str
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None


# Запуски

class CreateRun(Record):
    assistant_id: str


class FunctionToolCall(Record):
    name: str
    arguments: str  # JSON-строка, не разбирается


class ToolCall(Record):
    id: str
    type: str = "function"
    function: FunctionToolCall


class SubmitToolOutputs(Record):
    tool_calls: List[ToolCall] = Field(default_factory=list)


class RequiredAction(Record):
    type: str
    submit_tool_outputs: Optional[SubmitToolOutputs] = None


class RunError(Record):
    code: Optional[str] = None
    message: Optional[str] = None


class Run(Record):
    id: str
    thread_id: str
    assistant_id: str
    status: str
    required_action: Optional[RequiredAction] = None
    last_error: Optional[Union[RunError, str]] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


# Зарезервировано под отправку результатов инструментов (пока не реализована)

class VisitArguments(Record):
    """Аргументы функции store_visit."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    town_name: str = Field(alias="townName")
    street_name: str = Field(alias="streetName")
    house_number: str = Field(alias="houseNumber")
    family_name: str = Field(alias="familyName")
    successfully_visited: bool = Field(alias="successfullyVisited")


class ToolsOutput(Record):
    tool_call_id: str
    output: str
