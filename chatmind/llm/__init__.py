"""Remote chat backend package.

Architectural role:
    Optional remote pre-stage in front of the local pipeline.

Module split:
    - `provider_config`: environment-driven endpoint, model, timeout and key lookup.
    - `service`: per-session history window and payload construction.
    - `client`: HTTP transport and response parsing.
    - `exceptions`: failure types raised by the transport.
"""
