"""Generative-language API access package.

Module split:
    - `provider_config`: endpoint template and generation defaults.
    - `client`: HTTP transport returning the raw JSON body.
    - `extraction`: ordered response-shape strategies (text and image).
    - `service`: chat and image-analysis entrypoints.
"""
