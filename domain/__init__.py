"""Describes the Dinner App domain. Centres around the `RecipeStore`.

Why is this easy?

- Everything lives in memory for as long as the process does.
- Recipes are only ever added. No edits, no deletes.
- The one invariant is the id: ``1 + max(ids)``, or ``0`` when empty.

Free text from forms is split into lines before the store sees it.
"""
