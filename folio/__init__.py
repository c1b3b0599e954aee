"""
FOLIO - Form-driven Organizer for Layout, Inspection and Optimization

A client-side resume authoring engine. Structured resume content is normalized
into a canonical document, scored with a deterministic ATS readiness heuristic,
and rendered into printable text views.

Architecture:
- Normalization Context: Canonical resume document, coercion of untrusted data, editing
- Scoring Context: Predicates over documents and the ATS readiness score
- Persistence Context: Key-value store capability and resume/template records
- Rendering Context: Preview view-model and template-based text export
- Tracking Context: Step-gated build artifact tracker (independent of the resume engine)
"""

__version__ = "0.1.0"
