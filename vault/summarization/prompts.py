"""Prompt templates for chunk summaries, the final fold, and one-shot summaries."""

CHUNK_PROMPT = "Summarize the following YouTube transcript into key bullet points:\n\n{text}"

FOLD_PROMPT = "Summarize the following into 5 key bullet points:\n\n{text}"

SINGLE_SHOT_PROMPT = (
    "Summarize the following transcript in key bullet points "
    "with a focus on actionable insights:\n\n{text}"
)
