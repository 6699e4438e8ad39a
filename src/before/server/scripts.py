"""The client script payload the host attaches to interactive pages.

Served at ``AppConfig.client_script_path``.  It marks the document as
hydrated and announces readiness so site widgets can attach behavior.
Pages declaring ``PageConfig(disable_client_script=True)`` never load it.
"""

CLIENT_SCRIPT_JS = """\
(function() {
  if (window.__beforeClient) return;
  window.__beforeClient = true;
  document.documentElement.setAttribute("data-hydrated", "true");
  document.dispatchEvent(new CustomEvent("before:ready"));
})();
"""

CLIENT_SCRIPT_CONTENT_TYPE = "application/javascript; charset=utf-8"
