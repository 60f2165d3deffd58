"""Auto-fit newspaper article text into a fixed-template design.

Package structure:
    newsfit/config.py        – paths, API key, Claude settings, fit limits, slot names
    newsfit/errors.py        – user-facing error types
    newsfit/events.py        – one-way progress/result notifications
    newsfit/credentials.py   – saved Claude API key
    newsfit/document/        – node types and the in-memory document host
    newsfit/loaders/         – article and document JSON loading
    newsfit/layout/          – slot detection and column distribution
    newsfit/pipeline/        – Claude rewrite step, fit loop, user operations
    newsfit/report.py        – CLI report formatting
"""
