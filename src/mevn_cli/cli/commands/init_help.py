"""Shared help text for the init command."""

INIT_COMMAND_DOC = """
Bootstrap a MEVN stack webapp from a boilerplate template.

What happens:
- Checks that PROJECT_NAME is a valid npm package name and is not taken
- Prompts for a template: basic, pwa, graphql or Nuxt-js
- Clones the template with git into ./PROJECT_NAME
- Writes mevn.json (do not delete it, the other mevn commands read it)
- Nuxt-js only: asks about PWA support and Universal/SPA rendering mode
- Replaces the template's git history with a single "Initial commit"

Examples:
  mevn init my-app
  mevn init my-app --debug

Environment:
  MEVN_GIT_EXECUTABLE   git binary to use (default: git)
  MEVN_LOG_LEVEL        DEBUG, INFO, WARNING (default), ERROR or CRITICAL
"""
