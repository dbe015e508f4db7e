import pytest

from localesetup.resolve import resolve
from localesetup.variables import LegacyLocale
from localesetup.variables import VARIABLES, Variable

LANG = Variable.LANG
LC_CTYPE = Variable.LC_CTYPE
LC_TIME = Variable.LC_TIME


def test_variables_fixed_order_without_lc_all():
    assert [v.value for v in VARIABLES][:3] == ['LANG', 'LANGUAGE', 'LC_CTYPE']
    assert VARIABLES[-1] == Variable.LC_IDENTIFICATION
    assert len(VARIABLES) == 14
    assert 'LC_ALL' not in {v.value for v in VARIABLES}


def test_nothing_set_resolves_to_nothing():
    assert resolve({}, {}, LegacyLocale()) == {}
    assert resolve({}, {}) == {}


def test_boot_value_wins_per_variable():
    boot = {LANG: 'de_DE.UTF-8'}
    primary = {LANG: 'en_US.UTF-8', LC_TIME: 'en_GB.UTF-8'}
    assert resolve(boot, primary) == {LANG: 'de_DE.UTF-8', LC_TIME: 'en_GB.UTF-8'}


def test_empty_string_is_a_value():
    assert resolve({LANG: ''}, {LANG: 'en_US.UTF-8'}) == {LANG: ''}


def test_inputs_are_not_modified():
    boot, primary = {LANG: 'C'}, {LC_TIME: 'en_GB.UTF-8'}
    resolve(boot, primary, LegacyLocale('x', 'y', 'ctype'))
    assert boot == {LANG: 'C'}
    assert primary == {LC_TIME: 'en_GB.UTF-8'}


@pytest.mark.parametrize('mode', ['yes', 'YES', 'Yes'])
def test_root_uses_lang_yes_sets_lang(mode):
    legacy = LegacyLocale(rc_lang='en_US.UTF-8', root_uses_lang=mode)
    assert resolve({}, {}, legacy) == {LANG: 'en_US.UTF-8'}


def test_root_uses_lang_yes_without_rc_lang_sets_nothing():
    assert resolve({}, {}, LegacyLocale(root_uses_lang='yes')) == {}


def test_root_uses_lang_yes_ignored_when_any_variable_set():
    legacy = LegacyLocale(rc_lang='en_US.UTF-8', root_uses_lang='yes')
    assert resolve({}, {LC_TIME: 'en_GB.UTF-8'}, legacy) == {LC_TIME: 'en_GB.UTF-8'}
    assert resolve({LC_TIME: 'C'}, {}, legacy) == {LC_TIME: 'C'}


def test_root_uses_lang_ctype_uses_rc_lc_ctype():
    legacy = LegacyLocale(rc_lang='en_US.UTF-8', rc_lc_ctype='de_DE.UTF-8', root_uses_lang='ctype')
    assert resolve({}, {}, legacy) == {LC_CTYPE: 'de_DE.UTF-8'}


def test_root_uses_lang_ctype_copies_resolved_lang():
    legacy = LegacyLocale(rc_lc_ctype='de_DE.UTF-8', root_uses_lang='CTYPE')
    resolved = resolve({}, {LANG: 'fr_FR.UTF-8'}, legacy)
    assert resolved == {LANG: 'fr_FR.UTF-8', LC_CTYPE: 'fr_FR.UTF-8'}


def test_root_uses_lang_ctype_falls_back_to_rc_lang():
    legacy = LegacyLocale(rc_lang='en_US.UTF-8', rc_lc_ctype='', root_uses_lang='ctype')
    assert resolve({}, {}, legacy) == {LC_CTYPE: 'en_US.UTF-8'}


def test_root_uses_lang_ctype_with_only_empty_candidates():
    legacy = LegacyLocale(rc_lang='', rc_lc_ctype='', root_uses_lang='ctype')
    assert resolve({}, {}, legacy) == {}


def test_root_uses_lang_ctype_keeps_existing_lc_ctype():
    legacy = LegacyLocale(rc_lc_ctype='de_DE.UTF-8', root_uses_lang='ctype')
    assert resolve({LC_CTYPE: 'C.UTF-8'}, {}, legacy) == {LC_CTYPE: 'C.UTF-8'}


@pytest.mark.parametrize('mode', [None, '', 'no', 'true', ' yes'])
def test_other_root_uses_lang_values_disable_derivation(mode):
    legacy = LegacyLocale(rc_lang='en_US.UTF-8', rc_lc_ctype='de_DE.UTF-8', root_uses_lang=mode)
    assert resolve({}, {}, legacy) == {}


def test_root_uses_lang_ctype_applies_when_other_variables_are_set():
    legacy = LegacyLocale(rc_lang='en_US.UTF-8', rc_lc_ctype='de_DE.UTF-8', root_uses_lang='ctype')
    resolved = resolve({}, {LC_TIME: 'en_GB.UTF-8'}, legacy)
    assert resolved == {LC_TIME: 'en_GB.UTF-8', LC_CTYPE: 'de_DE.UTF-8'}
