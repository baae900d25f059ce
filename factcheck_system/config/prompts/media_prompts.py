"""Prompt templates for image authenticity inspection.

The rubric lists eight inspection categories. The model is asked to close
with a fenced JSON block that the media analyzer parses.
"""

MEDIA_INSPECTION_CATEGORIES = (
    "Lighting and shadow consistency: light direction, shadow angles and intensity match across subjects",
    "Edge warping: bent or melted edges around faces, hands, hair and object boundaries",
    "Skin texture artifacts: overly smooth, waxy or repeating skin patterns",
    "Generative model artifacts: malformed hands or teeth, asymmetric accessories, nonsensical background detail",
    "Text anomalies: garbled, misspelled or warped lettering on signs, labels and documents",
    "Reflection and perspective inconsistency: mirrors, eyes and vanishing lines that disagree with the scene",
    "Compression artifact patterns: regions with different JPEG quality or blocking suggesting splicing",
    "Metadata anomalies: visible watermarks, editing-tool traces or signs of re-encoding",
)

MEDIA_SYSTEM_PROMPT = '''You are a forensic image analyst specializing in detecting manipulated and AI-generated images.
Inspect the supplied image carefully for each of the following:

{categories}

Describe what you observe for each category, then at the END of your response include this exact JSON block:
```json
{{"authenticityScore": 0.0-1.0, "indicators": ["short description of each manipulation sign found"], "notes": "1-2 sentence summary"}}
```
An authenticityScore of 1.0 means the image appears entirely authentic; 0.0 means it is certainly manipulated or generated.'''

MEDIA_USER_PROMPT = "Analyze this image ({filename}) for signs of manipulation or AI generation."


def build_media_system_prompt() -> str:
    """Render the system prompt with the numbered inspection rubric."""
    categories = "\n".join(
        f"{i}. {category}" for i, category in enumerate(MEDIA_INSPECTION_CATEGORIES, start=1)
    )
    return MEDIA_SYSTEM_PROMPT.format(categories=categories)
