# main.py

"""Streamlit web UI for the JSON value replacement service.

Provides a simple interface to submit a JSON document and receive a copy
with every occurrence of a target value replaced.
"""

import json
import logging
import streamlit as st
from replacement.logging_config import configure_logging
from replacement.service.config import settings
from replacement.service.pipeline import replace_json

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


def parse_value(raw: str):
    """Reads a field as JSON, falling back to the raw text as a string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts a JSON document and
    replacement options from the user, invokes the replacement pipeline, and
    displays the rewritten document along with the replacement count.
    """
    st.set_page_config(layout="wide", page_title="JSON Value Replacement")

    st.title("JSON Value Replacement")
    st.markdown(
        "Replace every occurrence of a value anywhere in a JSON document, "
        "optionally up to a maximum number of replacements."
    )
    st.markdown("---")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input Document")
        payload_input = st.text_area(
            "JSON Payload",
            height=400,
            placeholder='{"animal": "dog", "pet": "dog"}',
        )
        target_input = st.text_input("Target value", value="")
        replacement_input = st.text_input("Replacement value", value="")
        limit_enabled = st.checkbox("Limit number of replacements")
        limit_input = st.number_input(
            "Maximum replacements", min_value=0, value=1, step=1,
            disabled=not limit_enabled,
        )

    with col2:
        st.subheader("Result")

        if st.button("Replace", type="primary"):
            if not payload_input or not payload_input.strip():
                st.warning("Please enter a JSON document to process.")
                logger.warning("Replacement attempted with empty input")

            else:
                try:
                    payload = json.loads(payload_input)
                except json.JSONDecodeError as e:
                    st.error(f"Payload is not valid JSON: {e}")
                    logger.warning("Replacement attempted with invalid JSON")
                    return

                body = {"payload": payload}
                # Empty fields fall back to the configured defaults
                if target_input:
                    body["targetValue"] = parse_value(target_input)
                if replacement_input:
                    body["replacementValue"] = parse_value(replacement_input)
                if limit_enabled:
                    body["maxReplacements"] = int(limit_input)

                try:
                    with st.spinner("Replacing..."):
                        response = replace_json(body)

                    if "error" in response.metadata:
                        st.error(f"Replacement failed: {response.metadata['error']}")
                    else:
                        st.json(response.result)
                        st.success(
                            f"Replacement complete. "
                            f"Replaced {response.replacement_count} values."
                        )

                except Exception:
                    st.error("An unexpected error occurred during replacement.")
                    logger.error(
                        "Unexpected error in main application loop",
                        exc_info=True,
                        extra={"payload_length": len(payload_input)},
                    )

    with st.sidebar:
        st.header("About")
        st.markdown("""
        Values are matched exactly:

        - **Strings, numbers, booleans, null** match by value and kind
          (`true` never matches `1`)
        - Objects and arrays match by identity only, so a target typed here
          never matches a container in the document
        - Replacements happen in document order, so a limit keeps the
          earliest occurrences

        Leave the target or replacement empty to use the configured defaults.
        """)


if __name__ == "__main__":
    main()
