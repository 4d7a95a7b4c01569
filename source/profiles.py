"""
Варианты ассистента для демо: персона, инструкции, инструменты и первое сообщение.
"""
from typing import Dict, NamedTuple

from schemas import (
    Assistant, FunctionParameter, FunctionParameters,
    FunctionTool, FunctionToolEnvelope,
)

MODEL = "gpt-3.5-turbo-1106"

class Profile(NamedTuple):
    assistant: Assistant
    message: str

FUNDRAISER_INSTRUCTIONS = """\
You are a helpful assistant supporting people doing fundraising by visiting
people in their community. Fundraisers will tell you about which households
they visited (town name, street name, house number, family name). Additionally,
they will tell you whether they met someone or not. Fundraising happens in Orlando, Florida,
so town and street names are in English.

Try to identify the necessary data about the household and the flag whether someone
was met or not. Ask the fundraiser questions until you have all the necessary data.
Once you have the data, call the function 'store_visit' with the data as parameters.
"""

STORE_VISIT = FunctionToolEnvelope(
    function=FunctionTool(
        name="store_visit",
        description="Stores a visit in the database",
        parameters=FunctionParameters(
            properties={
                "townName": FunctionParameter(
                    type="string", description="Name of the town of the visited household"),
                "streetName": FunctionParameter(
                    type="string", description="Name of the street of the visited household"),
                "houseNumber": FunctionParameter(
                    type="string", description="House number of the visited household"),
                "familyName": FunctionParameter(
                    type="string", description="Family name of the visited household"),
                "successfullyVisited": FunctionParameter(
                    type="boolean", description="Value indicating whether someone was met or not"),
            },
            required=["townName", "streetName", "houseNumber", "familyName", "successfullyVisited"],
        ),
    )
)

FUNDRAISER = Profile(
    assistant=Assistant(
        name="Cooper, an AI Assistant",
        description="Assistant used in a fundraising scenario helping fundraisers to store visits",
        model=MODEL,
        instructions=FUNDRAISER_INSTRUCTIONS,
        tools=[STORE_VISIT],
    ),
    message=(
        "Hi! I just visited the family Tipping in Orlando at 3246 Touraine Avenue, 32812.\n"
        "They were at home.\n"
    ),
)

PLAIN_INSTRUCTIONS = """\
You are a friendly assistant for people doing fundraising in their community.
Answer questions about planning household visits briefly and politely.
"""

PLAIN = Profile(
    assistant=Assistant(
        name="Cody's Assistant",
        description="Assistant answering general questions of fundraisers",
        model=MODEL,
        instructions=PLAIN_INSTRUCTIONS,
    ),
    message="Hi! How many households should I plan to visit in one afternoon?\n",
)

PROFILES: Dict[str, Profile] = {
    "fundraiser": FUNDRAISER,
    "plain": PLAIN,
}

def get_profile(name: str) -> Profile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(
            f"Неизвестный вариант ассистента: {name} (доступны: {', '.join(PROFILES)})"
        ) from None
