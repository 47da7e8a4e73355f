"""
Concurrency domains running the stages of sequences
"""
