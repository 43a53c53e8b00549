"""Graph construction helpers.

This package provides edge-list builders with node validation (`build`),
NetworkX interop (`convert`) and built-in example graphs (`samples`).
"""
