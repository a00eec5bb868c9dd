# src/novelizer/observability/names.py

"""Standard metric names for novelizer observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Transcript Metrics
# ============================================================================

# Counters
TRANSCRIPT_MESSAGES_PARSED = "transcript_messages_parsed"
TRANSCRIPT_MESSAGES_FILTERED = "transcript_messages_filtered"


# ============================================================================
# Segmentation Metrics
# ============================================================================

# Duration
SEGMENTATION_DURATION = "segmentation_duration"

# Counters
SEGMENTATION_CHAPTERS_CREATED = "segmentation_chapters_created"


# ============================================================================
# Pipeline Metrics
# ============================================================================

# Duration
PIPELINE_CHAPTER_DURATION = "pipeline_chapter_duration"
PIPELINE_RUN_DURATION = "pipeline_run_duration"

# Counters
PIPELINE_CHAPTERS_GENERATED = "pipeline_chapters_generated"
PIPELINE_RUNS_FAILED = "pipeline_runs_failed"
