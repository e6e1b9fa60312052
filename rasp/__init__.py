"""rasp package: project snapshot versioning and archiving.

Layout:

- rasp/versioning   name codec, sibling scanning, version resolution, snapshots
- rasp/archiving    archive selection and copy-verify-delete moves
- rasp/config       settings snapshot and JSON settings store
- rasp/decisions    decision providers for conflict points
- rasp/host         live-project accessor and save-as collaborator
- rasp/fs           file primitives

Operations take an immutable settings snapshot plus their collaborators and
return structured results; nothing here keeps global state between calls.
"""

__version__ = "0.3.0"
