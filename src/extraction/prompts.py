"""Prompt template for action item extraction."""

from __future__ import annotations

from src.extraction.models import CompletionRequest

# Low randomness keeps extraction consistent between runs
TEMPERATURE = 0.3
MAX_TOKENS = 2000

SYSTEM_PROMPT = """You are an expert assistant that extracts action items from meeting notes.

Analyze the meeting notes and extract ALL action items, tasks, or commitments mentioned.

For each action item, provide:
1. task: Clear description of what needs to be done
2. assignee: Person's name if mentioned (null if not specified)
3. priority: Classify as "high", "medium", or "low" based on urgency indicators
4. deadline: Any mentioned date/time (null if not specified)
5. context: Brief context from the meeting (1 sentence)

IMPORTANT: Respond ONLY with valid JSON. No markdown, no explanations, just the JSON object.

Format:
{
  "actionItems": [
    {
      "task": "string",
      "assignee": "string or null",
      "priority": "high|medium|low",
      "deadline": "string or null",
      "context": "string"
    }
  ],
  "summary": "One sentence summary of the meeting"
}"""

USER_PROMPT_PREFIX = "Extract action items from these meeting notes:\n\n"


def build_prompt(notes: str) -> CompletionRequest:
    """Render the fixed instructions and the notes into a completion request.

    The notes are embedded verbatim; no truncation happens here.
    """
    return CompletionRequest(
        system=SYSTEM_PROMPT,
        user=f"{USER_PROMPT_PREFIX}{notes}",
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
        json_response=True,
    )
