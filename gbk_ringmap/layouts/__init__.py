"""
Table layout definitions sub-package for gbk-ringmap.

Contains YAML files that define the fixed column positions of a
feature table. The loader module (layout_registry.py in the parent
package) reads these files at runtime.
"""
