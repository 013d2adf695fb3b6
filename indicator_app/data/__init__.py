"""
Market data models module.

Immutable snapshots assembled by external data providers: daily prices,
fundamentals, chip (ownership/leverage) data and insider trading summaries.
"""
