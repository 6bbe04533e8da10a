"""
Test suite for the EchoVerse gateway

This package contains unit tests for the gateway components:
- test_normalization.py: system instruction, text extraction, transcript joining, WAV repair
- test_watsonx.py: watsonx generation adapter
- test_watson_speech.py: Watson Text to Speech / Speech to Text adapters
- test_uploads.py: upload spooling and cleanup
- test_api.py: HTTP endpoints and error mapping
"""
