from fun4kidz.app.ui import VIEW_SESSION_KEY
from fun4kidz.registration.catalog import MEMBERSHIP_TONE, TONE_STYLES


def total_of(response):
    text = response.get_data(as_text=True)
    marker = 'data-total="'
    start = text.index(marker) + len(marker)
    return text[start:text.index('"', start)]


# UI-001: public pages render
def test_pages_render(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"Quick Registration Interest" in r.data
    assert b"$135/week" in r.data

    r = client.get("/programs")
    assert r.status_code == 200
    assert b"$75 Registration Fee per family" in r.data
    assert b'id="lego-robotics"' in r.data


# UI-002: an empty registration page totals zero
def test_register_page_empty(client):
    r = client.get("/register")
    assert r.status_code == 200
    assert total_of(r) == "0.00"
    assert b'http-equiv="refresh"' not in r.data


# UI-003: posting the form reprices it and formats card inputs
def test_update_reprices(client, valid_post):
    valid_post["children.full_name"] = ["Ana", "Ben"]
    r = client.post("/register", data=valid_post)
    assert r.status_code == 200
    assert total_of(r) == "265.00"
    assert b"Learn &amp; Play Program - Weekly Rate (2 children)" in r.data
    assert b"$240/week for 2 children" in r.data
    assert b"Program fees" in r.data
    assert b'value="4111 1111 1111 1111"' in r.data
    assert b'value="12/29"' in r.data


# UI-004: ticking membership while a program is on switches to membership
def test_membership_wins_when_just_ticked(client, valid_post):
    valid_post["program.membership_only"] = "1"
    valid_post["prev_membership_only"] = "0"
    r = client.post("/register", data=valid_post)
    assert total_of(r) == "25.00"
    assert b'name="prev_membership_only" value="1"' in r.data


# UI-005: ticking a program while membership is on switches to the program
def test_program_wins_when_just_ticked(client, valid_post):
    valid_post["program.membership_only"] = "1"
    valid_post["prev_membership_only"] = "1"
    valid_post["program.selected_programs"] = "after-school"
    r = client.post("/register", data=valid_post)
    assert total_of(r) == "235.00"
    assert b'name="prev_membership_only" value="0"' in r.data


# UI-006: add and remove child rows
def test_child_rows(client, valid_post):
    r = client.post("/register", data={**valid_post, "action": "add_child"})
    assert r.get_data(as_text=True).count('name="children.full_name"') == 2

    valid_post["children.full_name"] = ["Ana", "Ben"]
    r = client.post("/register", data={**valid_post, "action": "remove_child:0"})
    text = r.get_data(as_text=True)
    assert text.count('name="children.full_name"') == 1
    assert 'value="Ben"' in text
    assert "remove_child:" not in text


# UI-007: invalid submit re-renders with field errors
def test_submit_invalid(client, valid_post):
    valid_post["parent.email"] = "not-an-email"
    r = client.post("/register", data={**valid_post, "action": "submit"})
    assert r.status_code == 400
    assert b'data-path="parent.email"' in r.data
    assert b"Please enter a valid email address" in r.data
    # the rest of the form is kept
    assert b'value="Springfield"' in r.data


# UI-008: successful submit redirects and shows the notice
def test_submit_success(client, valid_post):
    r = client.post("/register", data={**valid_post, "action": "submit"})
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/register")

    with client.session_transaction() as sess:
        timers = sess[VIEW_SESSION_KEY]
        assert timers["phase"] == "success"
        # card data never goes into the cookie
        assert "4111" not in str(timers)

    r = client.get("/register")
    assert b"Registration submitted successfully!" in r.data
    assert b"Thank you!" in r.data
    assert b'http-equiv="refresh"' in r.data


# UI-009: after the deadlines pass the page is back to a fresh form
def test_success_resets(client, valid_post):
    client.post("/register", data={**valid_post, "action": "submit"})
    with client.session_transaction() as sess:
        timers = dict(sess[VIEW_SESSION_KEY])
        timers["reset_at"] = 1.0
        sess[VIEW_SESSION_KEY] = timers

    r = client.get("/register")
    assert b"Thank you!" not in r.data
    # notice is still up until its own deadline
    assert b"Registration submitted successfully!" in r.data
    assert total_of(r) == "0.00"

    with client.session_transaction() as sess:
        timers = dict(sess[VIEW_SESSION_KEY])
        timers["notice_hide_at"] = 1.0
        sess[VIEW_SESSION_KEY] = timers

    r = client.get("/register")
    assert b"Registration submitted successfully!" not in r.data
    with client.session_transaction() as sess:
        assert VIEW_SESSION_KEY not in sess


# UI-010: interest form flashes the outcome
def test_interest_form(client):
    r = client.post("/interest", data={"name": "Dana", "email": "dana@example.com", "program": "learn-play"})
    assert r.status_code == 302
    r = client.get("/")
    assert b"Thanks!" in r.data

    client.post("/interest", data={"name": "", "email": "dana@example.com"})
    r = client.get("/")
    assert b"Name is required" in r.data


# UI-011: the membership option takes its selected style from the tone table
def test_membership_option_style(client, valid_post):
    valid_post["program.membership_only"] = "1"
    r = client.post("/register", data=valid_post)
    assert f'class="option {TONE_STYLES[MEMBERSHIP_TONE].selected}"'.encode() in r.data
