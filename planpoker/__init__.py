"""
Planpoker - Planning Poker Synchronization Client

A client for shared, real-time estimation sessions. Participants register a
name, pick an estimate card and see the results after a group reveal.
The client provides:
- A perpetual status poller with failure backoff
- Reconciliation of server snapshots with optimistic local state
- The registration / voting / reveal session state machine
- A stateless projection of local state onto a UI description
"""

__version__ = "0.1.0"
