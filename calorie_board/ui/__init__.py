"""Streamlit UI components.

Each module inside `ui` should focus purely on presentation / user interaction
logic, delegating state transitions and data manipulation to the `helpers`
package.
"""
