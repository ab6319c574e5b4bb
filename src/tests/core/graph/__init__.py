"""Test suite for the amflow workflow graph.

This package is organized into the following structure:

1. Graph Tests (test_base.py)
   - Vertex insertion and identities
   - Lookups
   - Typed and parallel edges

2. Vertex Tests (nodes/)
   - Vertex validation
   - Variant accessors

3. Construction (test_builder.py, test_rules.py)
   - Connection rules
   - Move bridge heuristics
   - Unresolved references

4. Analysis and Export (test_topology.py, test_viz.py, test_config.py)
   - Connected components
   - DOT serialization and rendering
   - Exporter configuration
"""
