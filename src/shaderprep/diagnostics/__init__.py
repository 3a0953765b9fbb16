from shaderprep.diagnostics.compile import compile_with_provenance
from shaderprep.diagnostics.remapper import DiagnosticRemapper, remap_diagnostics

__all__ = ['DiagnosticRemapper', 'compile_with_provenance', 'remap_diagnostics']
