"""Core orchestration package.

Architectural role:
    Exposes the per-conversation session object that sits between API/CLI
    entrypoints and the NLP, memory, retrieval, prompting and LLM subsystems.

Composition:
    - `engine`: `ChatSession` and the message-processing control flow.
    - `analysis_types`: shared label enums and immutable analysis records.

Determinism and side effects:
    Package import itself is deterministic and side-effect free.
"""
