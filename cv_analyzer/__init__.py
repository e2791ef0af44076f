"""
CV Analyzer.

Scores a résumé against a list of job postings using a hosted LLM.

Core components:
- backends: Provider descriptors (Groq, Gemini) and their request/response shapes
- analysis: Request building, transport, retry, normalization
- utils: JSON extraction from model output, job selection helpers
"""
