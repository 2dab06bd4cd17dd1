"""
Use Cases

Organized into domain folders:
- auth/: Sign in, sign out, own access
- users/: Admin user management and role assignment
- roles/: Role store
- permissions/: Permission catalog administration
- audit/: Activity log queries and rollups

Import from subdirectories.
"""
