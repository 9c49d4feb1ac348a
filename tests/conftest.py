from __future__ import annotations

import pytest

from botapigen.config import GeneratorConfig
from botapigen.parser import Diagnostics, ExtractionContext, Page

REFERENCE_HTML = """\
<h3><a class="anchor" name="available-types" href="#available-types"><i class="anchor-icon"></i></a>Available types</h3>
<p>All types used in the Bot API responses are represented as JSON-objects.</p>
<h4><a class="anchor" name="update" href="#update"><i class="anchor-icon"></i></a>Update</h4>
<p>This <a href="#available-types">object</a> represents an incoming update.<br><br>At most <strong>one</strong> of the optional parameters can be present in any given update.</p>
<table class="table">
<thead>
<tr><th>Field</th><th>Type</th><th>Description</th></tr>
</thead>
<tbody>
<tr><td>update_id</td><td>Integer</td><td>The update's unique identifier.</td></tr>
<tr><td>message</td><td><a href="#message">Message</a></td><td><em>Optional</em>. New incoming message of any kind</td></tr>
</tbody>
</table>
<h4><a class="anchor" name="photosize" href="#photosize"><i class="anchor-icon"></i></a>PhotoSize</h4>
<p>This object represents one size of a photo.</p>
<ul></ul>
<div class="note">not a block we know</div>
<h3><a class="anchor" name="available-methods" href="#available-methods"><i class="anchor-icon"></i></a>Available methods</h3>
<h4><a class="anchor" name="getupdates" href="#getupdates"><i class="anchor-icon"></i></a>getUpdates</h4>
<p>Use this method to receive incoming updates. Returns an Array of <a href="#update">Update</a> objects.</p>
<table class="table">
<thead>
<tr><th>Parameter</th><th>Type</th><th>Required</th><th>Description</th></tr>
</thead>
<tbody>
<tr><td>offset</td><td>Integer</td><td>Optional</td><td>Identifier of the first update to be returned.</td></tr>
<tr><td>allowed_updates</td><td>Array of String</td><td>Optional</td><td>List the types of updates you want your bot to receive.</td></tr>
</tbody>
</table>
<blockquote>
<p><strong>Notes</strong><br>This method will not work if an outgoing webhook is set up.</p>
<ul>
<li>first</li>
<li>second <code>x</code></li>
</ul>
</blockquote>
<h4><a class="anchor" name="getme" href="#getme"><i class="anchor-icon"></i></a>getMe</h4>
<p>A simple method for testing your bot's auth token. Requires no parameters.</p>
<h4><a class="anchor" name="sendmessage" href="#sendmessage"><i class="anchor-icon"></i></a>sendMessage</h4>
<p>Use this method to send text messages.</p>
<table class="table">
<thead>
<tr><th>Parameter</th><th>Type</th><th>Required</th><th>Description</th></tr>
</thead>
<tbody>
<tr><td>chat_id</td><td>Integer or String</td><td>Yes</td><td>Unique identifier for the target chat</td></tr>
<tr><td>text</td><td>String</td><td>Yes</td><td>Text of the message to be sent</td></tr>
<tr><td>reply_markup</td><td><a href="#inlinekeyboardmarkup">InlineKeyboardMarkup</a> or <a href="#replykeyboardmarkup">ReplyKeyboardMarkup</a></td><td>Optional</td><td>Additional interface options.</td></tr>
</tbody>
</table>
<hr>
<h4><a class="anchor" name="unterminated" href="#unterminated"><i class="anchor-icon"></i></a>Unterminated</h4>
<p>Nothing closes this section.</p>
"""


@pytest.fixture
def reference_html() -> str:
    return REFERENCE_HTML


@pytest.fixture
def page() -> Page:
    return Page.from_html(REFERENCE_HTML)


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def make_ctx(page: Page, diagnostics: Diagnostics):
    """Factory: ``make_ctx("Update")`` -> ExtractionContext over the reference page."""

    def factory(entity: str, html: str | None = None) -> ExtractionContext:
        return ExtractionContext(
            page=Page.from_html(html) if html is not None else page,
            entity=entity,
            config=GeneratorConfig(),
            diagnostics=diagnostics,
        )

    return factory
