"""
HAVEN Infrastructure Layer

External integrations: episode store, LLM providers, remote classifier
clients and metrics. Components sit behind abstract interfaces so the
services can be tested with fakes.
"""
