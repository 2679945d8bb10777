"""Application – dispatch of RPC actions to handler namespaces."""
