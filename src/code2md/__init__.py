"""
code2md: print source files and directories as Markdown code blocks.

See `code2md.file_gatherer` for the file-gathering API and
`code2md.markdown_output` for rendering.
"""
