#
# Generated by tools/generate_emoji.py from emoji-test.txt, do not edit
#
# Unicode Emoji 15.1, 5034 entries
#

# pylint: disable=too-many-lines,line-too-long

from .record import EmojiRecord, Status

VERSION = '15.1'

EMOJI_TABLE = {
    '\U0001f600': EmojiRecord('\U0001f600', 'grinning face', Status.FULLY_QUALIFIED, '1.0', '\U0001f600', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f603': EmojiRecord('\U0001f603', 'grinning face with big eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f603', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f604': EmojiRecord('\U0001f604', 'grinning face with smiling eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f604', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f601': EmojiRecord('\U0001f601', 'beaming face with smiling eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f601', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f606': EmojiRecord('\U0001f606', 'grinning squinting face', Status.FULLY_QUALIFIED, '0.6', '\U0001f606', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f605': EmojiRecord('\U0001f605', 'grinning face with sweat', Status.FULLY_QUALIFIED, '0.6', '\U0001f605', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f923': EmojiRecord('\U0001f923', 'rolling on the floor laughing', Status.FULLY_QUALIFIED, '3.0', '\U0001f923', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f602': EmojiRecord('\U0001f602', 'face with tears of joy', Status.FULLY_QUALIFIED, '0.6', '\U0001f602', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f642': EmojiRecord('\U0001f642', 'slightly smiling face', Status.FULLY_QUALIFIED, '1.0', '\U0001f642', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f643': EmojiRecord('\U0001f643', 'upside-down face', Status.FULLY_QUALIFIED, '1.0', '\U0001f643', 'Smileys & Emotion', 'face-smiling'),
    '\U0001fae0': EmojiRecord('\U0001fae0', 'melting face', Status.FULLY_QUALIFIED, '14.0', '\U0001fae0', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f609': EmojiRecord('\U0001f609', 'winking face', Status.FULLY_QUALIFIED, '0.6', '\U0001f609', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f60a': EmojiRecord('\U0001f60a', 'smiling face with smiling eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f60a', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f607': EmojiRecord('\U0001f607', 'smiling face with halo', Status.FULLY_QUALIFIED, '1.0', '\U0001f607', 'Smileys & Emotion', 'face-smiling'),
    '\U0001f970': EmojiRecord('\U0001f970', 'smiling face with hearts', Status.FULLY_QUALIFIED, '11.0', '\U0001f970', 'Smileys & Emotion', 'face-affection'),
    '\U0001f60d': EmojiRecord('\U0001f60d', 'smiling face with heart-eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f60d', 'Smileys & Emotion', 'face-affection'),
    '\U0001f929': EmojiRecord('\U0001f929', 'star-struck', Status.FULLY_QUALIFIED, '5.0', '\U0001f929', 'Smileys & Emotion', 'face-affection'),
    '\U0001f618': EmojiRecord('\U0001f618', 'face blowing a kiss', Status.FULLY_QUALIFIED, '0.6', '\U0001f618', 'Smileys & Emotion', 'face-affection'),
    '\U0001f617': EmojiRecord('\U0001f617', 'kissing face', Status.FULLY_QUALIFIED, '1.0', '\U0001f617', 'Smileys & Emotion', 'face-affection'),
    '\u263a\ufe0f': EmojiRecord('\u263a\ufe0f', 'smiling face', Status.FULLY_QUALIFIED, '0.6', '\u263a\ufe0f', 'Smileys & Emotion', 'face-affection'),
    '\u263a': EmojiRecord('\u263a', 'smiling face', Status.UNQUALIFIED, '0.6', '\u263a\ufe0f', 'Smileys & Emotion', 'face-affection'),
    '\U0001f61a': EmojiRecord('\U0001f61a', 'kissing face with closed eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f61a', 'Smileys & Emotion', 'face-affection'),
    '\U0001f619': EmojiRecord('\U0001f619', 'kissing face with smiling eyes', Status.FULLY_QUALIFIED, '1.0', '\U0001f619', 'Smileys & Emotion', 'face-affection'),
    '\U0001f972': EmojiRecord('\U0001f972', 'smiling face with tear', Status.FULLY_QUALIFIED, '13.0', '\U0001f972', 'Smileys & Emotion', 'face-affection'),
    '\U0001f60b': EmojiRecord('\U0001f60b', 'face savoring food', Status.FULLY_QUALIFIED, '0.6', '\U0001f60b', 'Smileys & Emotion', 'face-tongue'),
    '\U0001f61b': EmojiRecord('\U0001f61b', 'face with tongue', Status.FULLY_QUALIFIED, '1.0', '\U0001f61b', 'Smileys & Emotion', 'face-tongue'),
    '\U0001f61c': EmojiRecord('\U0001f61c', 'winking face with tongue', Status.FULLY_QUALIFIED, '0.6', '\U0001f61c', 'Smileys & Emotion', 'face-tongue'),
    '\U0001f92a': EmojiRecord('\U0001f92a', 'zany face', Status.FULLY_QUALIFIED, '5.0', '\U0001f92a', 'Smileys & Emotion', 'face-tongue'),
    '\U0001f61d': EmojiRecord('\U0001f61d', 'squinting face with tongue', Status.FULLY_QUALIFIED, '0.6', '\U0001f61d', 'Smileys & Emotion', 'face-tongue'),
    '\U0001f911': EmojiRecord('\U0001f911', 'money-mouth face', Status.FULLY_QUALIFIED, '1.0', '\U0001f911', 'Smileys & Emotion', 'face-tongue'),
    '\U0001f917': EmojiRecord('\U0001f917', 'smiling face with open hands', Status.FULLY_QUALIFIED, '1.0', '\U0001f917', 'Smileys & Emotion', 'face-hand'),
    '\U0001f92d': EmojiRecord('\U0001f92d', 'face with hand over mouth', Status.FULLY_QUALIFIED, '5.0', '\U0001f92d', 'Smileys & Emotion', 'face-hand'),
    '\U0001fae2': EmojiRecord('\U0001fae2', 'face with open eyes and hand over mouth', Status.FULLY_QUALIFIED, '14.0', '\U0001fae2', 'Smileys & Emotion', 'face-hand'),
    '\U0001fae3': EmojiRecord('\U0001fae3', 'face with peeking eye', Status.FULLY_QUALIFIED, '14.0', '\U0001fae3', 'Smileys & Emotion', 'face-hand'),
    '\U0001f92b': EmojiRecord('\U0001f92b', 'shushing face', Status.FULLY_QUALIFIED, '5.0', '\U0001f92b', 'Smileys & Emotion', 'face-hand'),
    '\U0001f914': EmojiRecord('\U0001f914', 'thinking face', Status.FULLY_QUALIFIED, '1.0', '\U0001f914', 'Smileys & Emotion', 'face-hand'),
    '\U0001fae1': EmojiRecord('\U0001fae1', 'saluting face', Status.FULLY_QUALIFIED, '14.0', '\U0001fae1', 'Smileys & Emotion', 'face-hand'),
    '\U0001f910': EmojiRecord('\U0001f910', 'zipper-mouth face', Status.FULLY_QUALIFIED, '1.0', '\U0001f910', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f928': EmojiRecord('\U0001f928', 'face with raised eyebrow', Status.FULLY_QUALIFIED, '5.0', '\U0001f928', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f610': EmojiRecord('\U0001f610', 'neutral face', Status.FULLY_QUALIFIED, '0.7', '\U0001f610', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f611': EmojiRecord('\U0001f611', 'expressionless face', Status.FULLY_QUALIFIED, '1.0', '\U0001f611', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f636': EmojiRecord('\U0001f636', 'face without mouth', Status.FULLY_QUALIFIED, '1.0', '\U0001f636', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001fae5': EmojiRecord('\U0001fae5', 'dotted line face', Status.FULLY_QUALIFIED, '14.0', '\U0001fae5', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f636\u200d\U0001f32b\ufe0f': EmojiRecord('\U0001f636\u200d\U0001f32b\ufe0f', 'face in clouds', Status.FULLY_QUALIFIED, '13.1', '\U0001f636\u200d\U0001f32b\ufe0f', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f636\u200d\U0001f32b': EmojiRecord('\U0001f636\u200d\U0001f32b', 'face in clouds', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f636\u200d\U0001f32b\ufe0f', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f60f': EmojiRecord('\U0001f60f', 'smirking face', Status.FULLY_QUALIFIED, '0.6', '\U0001f60f', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f612': EmojiRecord('\U0001f612', 'unamused face', Status.FULLY_QUALIFIED, '0.6', '\U0001f612', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f644': EmojiRecord('\U0001f644', 'face with rolling eyes', Status.FULLY_QUALIFIED, '1.0', '\U0001f644', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f62c': EmojiRecord('\U0001f62c', 'grimacing face', Status.FULLY_QUALIFIED, '1.0', '\U0001f62c', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f62e\u200d\U0001f4a8': EmojiRecord('\U0001f62e\u200d\U0001f4a8', 'face exhaling', Status.FULLY_QUALIFIED, '13.1', '\U0001f62e\u200d\U0001f4a8', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f925': EmojiRecord('\U0001f925', 'lying face', Status.FULLY_QUALIFIED, '3.0', '\U0001f925', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001fae8': EmojiRecord('\U0001fae8', 'shaking face', Status.FULLY_QUALIFIED, '15.0', '\U0001fae8', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f642\u200d\u2194\ufe0f': EmojiRecord('\U0001f642\u200d\u2194\ufe0f', 'head shaking horizontally', Status.FULLY_QUALIFIED, '15.1', '\U0001f642\u200d\u2194\ufe0f', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f642\u200d\u2194': EmojiRecord('\U0001f642\u200d\u2194', 'head shaking horizontally', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f642\u200d\u2194\ufe0f', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f642\u200d\u2195\ufe0f': EmojiRecord('\U0001f642\u200d\u2195\ufe0f', 'head shaking vertically', Status.FULLY_QUALIFIED, '15.1', '\U0001f642\u200d\u2195\ufe0f', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f642\u200d\u2195': EmojiRecord('\U0001f642\u200d\u2195', 'head shaking vertically', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f642\u200d\u2195\ufe0f', 'Smileys & Emotion', 'face-neutral-skeptical'),
    '\U0001f60c': EmojiRecord('\U0001f60c', 'relieved face', Status.FULLY_QUALIFIED, '0.6', '\U0001f60c', 'Smileys & Emotion', 'face-sleepy'),
    '\U0001f614': EmojiRecord('\U0001f614', 'pensive face', Status.FULLY_QUALIFIED, '0.6', '\U0001f614', 'Smileys & Emotion', 'face-sleepy'),
    '\U0001f62a': EmojiRecord('\U0001f62a', 'sleepy face', Status.FULLY_QUALIFIED, '0.6', '\U0001f62a', 'Smileys & Emotion', 'face-sleepy'),
    '\U0001f924': EmojiRecord('\U0001f924', 'drooling face', Status.FULLY_QUALIFIED, '3.0', '\U0001f924', 'Smileys & Emotion', 'face-sleepy'),
    '\U0001f634': EmojiRecord('\U0001f634', 'sleeping face', Status.FULLY_QUALIFIED, '1.0', '\U0001f634', 'Smileys & Emotion', 'face-sleepy'),
    '\U0001f637': EmojiRecord('\U0001f637', 'face with medical mask', Status.FULLY_QUALIFIED, '0.6', '\U0001f637', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f912': EmojiRecord('\U0001f912', 'face with thermometer', Status.FULLY_QUALIFIED, '1.0', '\U0001f912', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f915': EmojiRecord('\U0001f915', 'face with head-bandage', Status.FULLY_QUALIFIED, '1.0', '\U0001f915', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f922': EmojiRecord('\U0001f922', 'nauseated face', Status.FULLY_QUALIFIED, '3.0', '\U0001f922', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f92e': EmojiRecord('\U0001f92e', 'face vomiting', Status.FULLY_QUALIFIED, '5.0', '\U0001f92e', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f927': EmojiRecord('\U0001f927', 'sneezing face', Status.FULLY_QUALIFIED, '3.0', '\U0001f927', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f975': EmojiRecord('\U0001f975', 'hot face', Status.FULLY_QUALIFIED, '11.0', '\U0001f975', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f976': EmojiRecord('\U0001f976', 'cold face', Status.FULLY_QUALIFIED, '11.0', '\U0001f976', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f974': EmojiRecord('\U0001f974', 'woozy face', Status.FULLY_QUALIFIED, '11.0', '\U0001f974', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f635': EmojiRecord('\U0001f635', 'face with crossed-out eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f635', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f635\u200d\U0001f4ab': EmojiRecord('\U0001f635\u200d\U0001f4ab', 'face with spiral eyes', Status.FULLY_QUALIFIED, '13.1', '\U0001f635\u200d\U0001f4ab', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f92f': EmojiRecord('\U0001f92f', 'exploding head', Status.FULLY_QUALIFIED, '5.0', '\U0001f92f', 'Smileys & Emotion', 'face-unwell'),
    '\U0001f920': EmojiRecord('\U0001f920', 'cowboy hat face', Status.FULLY_QUALIFIED, '3.0', '\U0001f920', 'Smileys & Emotion', 'face-hat'),
    '\U0001f973': EmojiRecord('\U0001f973', 'partying face', Status.FULLY_QUALIFIED, '11.0', '\U0001f973', 'Smileys & Emotion', 'face-hat'),
    '\U0001f978': EmojiRecord('\U0001f978', 'disguised face', Status.FULLY_QUALIFIED, '13.0', '\U0001f978', 'Smileys & Emotion', 'face-hat'),
    '\U0001f60e': EmojiRecord('\U0001f60e', 'smiling face with sunglasses', Status.FULLY_QUALIFIED, '1.0', '\U0001f60e', 'Smileys & Emotion', 'face-glasses'),
    '\U0001f913': EmojiRecord('\U0001f913', 'nerd face', Status.FULLY_QUALIFIED, '1.0', '\U0001f913', 'Smileys & Emotion', 'face-glasses'),
    '\U0001f9d0': EmojiRecord('\U0001f9d0', 'face with monocle', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d0', 'Smileys & Emotion', 'face-glasses'),
    '\U0001f615': EmojiRecord('\U0001f615', 'confused face', Status.FULLY_QUALIFIED, '1.0', '\U0001f615', 'Smileys & Emotion', 'face-concerned'),
    '\U0001fae4': EmojiRecord('\U0001fae4', 'face with diagonal mouth', Status.FULLY_QUALIFIED, '14.0', '\U0001fae4', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f61f': EmojiRecord('\U0001f61f', 'worried face', Status.FULLY_QUALIFIED, '1.0', '\U0001f61f', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f641': EmojiRecord('\U0001f641', 'slightly frowning face', Status.FULLY_QUALIFIED, '1.0', '\U0001f641', 'Smileys & Emotion', 'face-concerned'),
    '\u2639\ufe0f': EmojiRecord('\u2639\ufe0f', 'frowning face', Status.FULLY_QUALIFIED, '0.7', '\u2639\ufe0f', 'Smileys & Emotion', 'face-concerned'),
    '\u2639': EmojiRecord('\u2639', 'frowning face', Status.UNQUALIFIED, '0.7', '\u2639\ufe0f', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f62e': EmojiRecord('\U0001f62e', 'face with open mouth', Status.FULLY_QUALIFIED, '1.0', '\U0001f62e', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f62f': EmojiRecord('\U0001f62f', 'hushed face', Status.FULLY_QUALIFIED, '1.0', '\U0001f62f', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f632': EmojiRecord('\U0001f632', 'astonished face', Status.FULLY_QUALIFIED, '0.6', '\U0001f632', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f633': EmojiRecord('\U0001f633', 'flushed face', Status.FULLY_QUALIFIED, '0.6', '\U0001f633', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f97a': EmojiRecord('\U0001f97a', 'pleading face', Status.FULLY_QUALIFIED, '11.0', '\U0001f97a', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f979': EmojiRecord('\U0001f979', 'face holding back tears', Status.FULLY_QUALIFIED, '14.0', '\U0001f979', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f626': EmojiRecord('\U0001f626', 'frowning face with open mouth', Status.FULLY_QUALIFIED, '1.0', '\U0001f626', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f627': EmojiRecord('\U0001f627', 'anguished face', Status.FULLY_QUALIFIED, '1.0', '\U0001f627', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f628': EmojiRecord('\U0001f628', 'fearful face', Status.FULLY_QUALIFIED, '0.6', '\U0001f628', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f630': EmojiRecord('\U0001f630', 'anxious face with sweat', Status.FULLY_QUALIFIED, '0.6', '\U0001f630', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f625': EmojiRecord('\U0001f625', 'sad but relieved face', Status.FULLY_QUALIFIED, '0.6', '\U0001f625', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f622': EmojiRecord('\U0001f622', 'crying face', Status.FULLY_QUALIFIED, '0.6', '\U0001f622', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f62d': EmojiRecord('\U0001f62d', 'loudly crying face', Status.FULLY_QUALIFIED, '0.6', '\U0001f62d', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f631': EmojiRecord('\U0001f631', 'face screaming in fear', Status.FULLY_QUALIFIED, '0.6', '\U0001f631', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f616': EmojiRecord('\U0001f616', 'confounded face', Status.FULLY_QUALIFIED, '0.6', '\U0001f616', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f623': EmojiRecord('\U0001f623', 'persevering face', Status.FULLY_QUALIFIED, '0.6', '\U0001f623', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f61e': EmojiRecord('\U0001f61e', 'disappointed face', Status.FULLY_QUALIFIED, '0.6', '\U0001f61e', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f613': EmojiRecord('\U0001f613', 'downcast face with sweat', Status.FULLY_QUALIFIED, '0.6', '\U0001f613', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f629': EmojiRecord('\U0001f629', 'weary face', Status.FULLY_QUALIFIED, '0.6', '\U0001f629', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f62b': EmojiRecord('\U0001f62b', 'tired face', Status.FULLY_QUALIFIED, '0.6', '\U0001f62b', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f971': EmojiRecord('\U0001f971', 'yawning face', Status.FULLY_QUALIFIED, '12.0', '\U0001f971', 'Smileys & Emotion', 'face-concerned'),
    '\U0001f624': EmojiRecord('\U0001f624', 'face with steam from nose', Status.FULLY_QUALIFIED, '0.6', '\U0001f624', 'Smileys & Emotion', 'face-negative'),
    '\U0001f621': EmojiRecord('\U0001f621', 'enraged face', Status.FULLY_QUALIFIED, '0.6', '\U0001f621', 'Smileys & Emotion', 'face-negative'),
    '\U0001f620': EmojiRecord('\U0001f620', 'angry face', Status.FULLY_QUALIFIED, '0.6', '\U0001f620', 'Smileys & Emotion', 'face-negative'),
    '\U0001f92c': EmojiRecord('\U0001f92c', 'face with symbols on mouth', Status.FULLY_QUALIFIED, '5.0', '\U0001f92c', 'Smileys & Emotion', 'face-negative'),
    '\U0001f608': EmojiRecord('\U0001f608', 'smiling face with horns', Status.FULLY_QUALIFIED, '1.0', '\U0001f608', 'Smileys & Emotion', 'face-negative'),
    '\U0001f47f': EmojiRecord('\U0001f47f', 'angry face with horns', Status.FULLY_QUALIFIED, '0.6', '\U0001f47f', 'Smileys & Emotion', 'face-negative'),
    '\U0001f480': EmojiRecord('\U0001f480', 'skull', Status.FULLY_QUALIFIED, '0.6', '\U0001f480', 'Smileys & Emotion', 'face-negative'),
    '\u2620\ufe0f': EmojiRecord('\u2620\ufe0f', 'skull and crossbones', Status.FULLY_QUALIFIED, '1.0', '\u2620\ufe0f', 'Smileys & Emotion', 'face-negative'),
    '\u2620': EmojiRecord('\u2620', 'skull and crossbones', Status.UNQUALIFIED, '1.0', '\u2620\ufe0f', 'Smileys & Emotion', 'face-negative'),
    '\U0001f4a9': EmojiRecord('\U0001f4a9', 'pile of poo', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a9', 'Smileys & Emotion', 'face-costume'),
    '\U0001f921': EmojiRecord('\U0001f921', 'clown face', Status.FULLY_QUALIFIED, '3.0', '\U0001f921', 'Smileys & Emotion', 'face-costume'),
    '\U0001f479': EmojiRecord('\U0001f479', 'ogre', Status.FULLY_QUALIFIED, '0.6', '\U0001f479', 'Smileys & Emotion', 'face-costume'),
    '\U0001f47a': EmojiRecord('\U0001f47a', 'goblin', Status.FULLY_QUALIFIED, '0.6', '\U0001f47a', 'Smileys & Emotion', 'face-costume'),
    '\U0001f47b': EmojiRecord('\U0001f47b', 'ghost', Status.FULLY_QUALIFIED, '0.6', '\U0001f47b', 'Smileys & Emotion', 'face-costume'),
    '\U0001f47d': EmojiRecord('\U0001f47d', 'alien', Status.FULLY_QUALIFIED, '0.6', '\U0001f47d', 'Smileys & Emotion', 'face-costume'),
    '\U0001f47e': EmojiRecord('\U0001f47e', 'alien monster', Status.FULLY_QUALIFIED, '0.6', '\U0001f47e', 'Smileys & Emotion', 'face-costume'),
    '\U0001f916': EmojiRecord('\U0001f916', 'robot', Status.FULLY_QUALIFIED, '1.0', '\U0001f916', 'Smileys & Emotion', 'face-costume'),
    '\U0001f63a': EmojiRecord('\U0001f63a', 'grinning cat', Status.FULLY_QUALIFIED, '0.6', '\U0001f63a', 'Smileys & Emotion', 'cat-face'),
    '\U0001f638': EmojiRecord('\U0001f638', 'grinning cat with smiling eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f638', 'Smileys & Emotion', 'cat-face'),
    '\U0001f639': EmojiRecord('\U0001f639', 'cat with tears of joy', Status.FULLY_QUALIFIED, '0.6', '\U0001f639', 'Smileys & Emotion', 'cat-face'),
    '\U0001f63b': EmojiRecord('\U0001f63b', 'smiling cat with heart-eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f63b', 'Smileys & Emotion', 'cat-face'),
    '\U0001f63c': EmojiRecord('\U0001f63c', 'cat with wry smile', Status.FULLY_QUALIFIED, '0.6', '\U0001f63c', 'Smileys & Emotion', 'cat-face'),
    '\U0001f63d': EmojiRecord('\U0001f63d', 'kissing cat', Status.FULLY_QUALIFIED, '0.6', '\U0001f63d', 'Smileys & Emotion', 'cat-face'),
    '\U0001f640': EmojiRecord('\U0001f640', 'weary cat', Status.FULLY_QUALIFIED, '0.6', '\U0001f640', 'Smileys & Emotion', 'cat-face'),
    '\U0001f63f': EmojiRecord('\U0001f63f', 'crying cat', Status.FULLY_QUALIFIED, '0.6', '\U0001f63f', 'Smileys & Emotion', 'cat-face'),
    '\U0001f63e': EmojiRecord('\U0001f63e', 'pouting cat', Status.FULLY_QUALIFIED, '0.6', '\U0001f63e', 'Smileys & Emotion', 'cat-face'),
    '\U0001f648': EmojiRecord('\U0001f648', 'see-no-evil monkey', Status.FULLY_QUALIFIED, '0.6', '\U0001f648', 'Smileys & Emotion', 'monkey-face'),
    '\U0001f649': EmojiRecord('\U0001f649', 'hear-no-evil monkey', Status.FULLY_QUALIFIED, '0.6', '\U0001f649', 'Smileys & Emotion', 'monkey-face'),
    '\U0001f64a': EmojiRecord('\U0001f64a', 'speak-no-evil monkey', Status.FULLY_QUALIFIED, '0.6', '\U0001f64a', 'Smileys & Emotion', 'monkey-face'),
    '\U0001f48c': EmojiRecord('\U0001f48c', 'love letter', Status.FULLY_QUALIFIED, '0.6', '\U0001f48c', 'Smileys & Emotion', 'heart'),
    '\U0001f498': EmojiRecord('\U0001f498', 'heart with arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f498', 'Smileys & Emotion', 'heart'),
    '\U0001f49d': EmojiRecord('\U0001f49d', 'heart with ribbon', Status.FULLY_QUALIFIED, '0.6', '\U0001f49d', 'Smileys & Emotion', 'heart'),
    '\U0001f496': EmojiRecord('\U0001f496', 'sparkling heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f496', 'Smileys & Emotion', 'heart'),
    '\U0001f497': EmojiRecord('\U0001f497', 'growing heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f497', 'Smileys & Emotion', 'heart'),
    '\U0001f493': EmojiRecord('\U0001f493', 'beating heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f493', 'Smileys & Emotion', 'heart'),
    '\U0001f49e': EmojiRecord('\U0001f49e', 'revolving hearts', Status.FULLY_QUALIFIED, '0.6', '\U0001f49e', 'Smileys & Emotion', 'heart'),
    '\U0001f495': EmojiRecord('\U0001f495', 'two hearts', Status.FULLY_QUALIFIED, '0.6', '\U0001f495', 'Smileys & Emotion', 'heart'),
    '\U0001f49f': EmojiRecord('\U0001f49f', 'heart decoration', Status.FULLY_QUALIFIED, '0.6', '\U0001f49f', 'Smileys & Emotion', 'heart'),
    '\u2763\ufe0f': EmojiRecord('\u2763\ufe0f', 'heart exclamation', Status.FULLY_QUALIFIED, '1.0', '\u2763\ufe0f', 'Smileys & Emotion', 'heart'),
    '\u2763': EmojiRecord('\u2763', 'heart exclamation', Status.UNQUALIFIED, '1.0', '\u2763\ufe0f', 'Smileys & Emotion', 'heart'),
    '\U0001f494': EmojiRecord('\U0001f494', 'broken heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f494', 'Smileys & Emotion', 'heart'),
    '\u2764\ufe0f\u200d\U0001f525': EmojiRecord('\u2764\ufe0f\u200d\U0001f525', 'heart on fire', Status.FULLY_QUALIFIED, '13.1', '\u2764\ufe0f\u200d\U0001f525', 'Smileys & Emotion', 'heart'),
    '\u2764\u200d\U0001f525': EmojiRecord('\u2764\u200d\U0001f525', 'heart on fire', Status.UNQUALIFIED, '13.1', '\u2764\ufe0f\u200d\U0001f525', 'Smileys & Emotion', 'heart'),
    '\u2764\ufe0f\u200d\U0001fa79': EmojiRecord('\u2764\ufe0f\u200d\U0001fa79', 'mending heart', Status.FULLY_QUALIFIED, '13.1', '\u2764\ufe0f\u200d\U0001fa79', 'Smileys & Emotion', 'heart'),
    '\u2764\u200d\U0001fa79': EmojiRecord('\u2764\u200d\U0001fa79', 'mending heart', Status.UNQUALIFIED, '13.1', '\u2764\ufe0f\u200d\U0001fa79', 'Smileys & Emotion', 'heart'),
    '\u2764\ufe0f': EmojiRecord('\u2764\ufe0f', 'red heart', Status.FULLY_QUALIFIED, '0.6', '\u2764\ufe0f', 'Smileys & Emotion', 'heart'),
    '\u2764': EmojiRecord('\u2764', 'red heart', Status.UNQUALIFIED, '0.6', '\u2764\ufe0f', 'Smileys & Emotion', 'heart'),
    '\U0001fa77': EmojiRecord('\U0001fa77', 'pink heart', Status.FULLY_QUALIFIED, '15.0', '\U0001fa77', 'Smileys & Emotion', 'heart'),
    '\U0001f9e1': EmojiRecord('\U0001f9e1', 'orange heart', Status.FULLY_QUALIFIED, '5.0', '\U0001f9e1', 'Smileys & Emotion', 'heart'),
    '\U0001f49b': EmojiRecord('\U0001f49b', 'yellow heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f49b', 'Smileys & Emotion', 'heart'),
    '\U0001f49a': EmojiRecord('\U0001f49a', 'green heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f49a', 'Smileys & Emotion', 'heart'),
    '\U0001f499': EmojiRecord('\U0001f499', 'blue heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f499', 'Smileys & Emotion', 'heart'),
    '\U0001fa75': EmojiRecord('\U0001fa75', 'light blue heart', Status.FULLY_QUALIFIED, '15.0', '\U0001fa75', 'Smileys & Emotion', 'heart'),
    '\U0001f49c': EmojiRecord('\U0001f49c', 'purple heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f49c', 'Smileys & Emotion', 'heart'),
    '\U0001f90e': EmojiRecord('\U0001f90e', 'brown heart', Status.FULLY_QUALIFIED, '12.0', '\U0001f90e', 'Smileys & Emotion', 'heart'),
    '\U0001f5a4': EmojiRecord('\U0001f5a4', 'black heart', Status.FULLY_QUALIFIED, '3.0', '\U0001f5a4', 'Smileys & Emotion', 'heart'),
    '\U0001fa76': EmojiRecord('\U0001fa76', 'grey heart', Status.FULLY_QUALIFIED, '15.0', '\U0001fa76', 'Smileys & Emotion', 'heart'),
    '\U0001f90d': EmojiRecord('\U0001f90d', 'white heart', Status.FULLY_QUALIFIED, '12.0', '\U0001f90d', 'Smileys & Emotion', 'heart'),
    '\U0001f48b': EmojiRecord('\U0001f48b', 'kiss mark', Status.FULLY_QUALIFIED, '0.6', '\U0001f48b', 'Smileys & Emotion', 'emotion'),
    '\U0001f4af': EmojiRecord('\U0001f4af', 'hundred points', Status.FULLY_QUALIFIED, '0.6', '\U0001f4af', 'Smileys & Emotion', 'emotion'),
    '\U0001f4a2': EmojiRecord('\U0001f4a2', 'anger symbol', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a2', 'Smileys & Emotion', 'emotion'),
    '\U0001f4a5': EmojiRecord('\U0001f4a5', 'collision', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a5', 'Smileys & Emotion', 'emotion'),
    '\U0001f4ab': EmojiRecord('\U0001f4ab', 'dizzy', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ab', 'Smileys & Emotion', 'emotion'),
    '\U0001f4a6': EmojiRecord('\U0001f4a6', 'sweat droplets', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a6', 'Smileys & Emotion', 'emotion'),
    '\U0001f4a8': EmojiRecord('\U0001f4a8', 'dashing away', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a8', 'Smileys & Emotion', 'emotion'),
    '\U0001f573\ufe0f': EmojiRecord('\U0001f573\ufe0f', 'hole', Status.FULLY_QUALIFIED, '0.7', '\U0001f573\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f573': EmojiRecord('\U0001f573', 'hole', Status.UNQUALIFIED, '0.7', '\U0001f573\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f4ac': EmojiRecord('\U0001f4ac', 'speech balloon', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ac', 'Smileys & Emotion', 'emotion'),
    '\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f': EmojiRecord('\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f', 'eye in speech bubble', Status.FULLY_QUALIFIED, '2.0', '\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f441\u200d\U0001f5e8\ufe0f': EmojiRecord('\U0001f441\u200d\U0001f5e8\ufe0f', 'eye in speech bubble', Status.UNQUALIFIED, '2.0', '\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f441\ufe0f\u200d\U0001f5e8': EmojiRecord('\U0001f441\ufe0f\u200d\U0001f5e8', 'eye in speech bubble', Status.MINIMALLY_QUALIFIED, '2.0', '\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f441\u200d\U0001f5e8': EmojiRecord('\U0001f441\u200d\U0001f5e8', 'eye in speech bubble', Status.UNQUALIFIED, '2.0', '\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f5e8\ufe0f': EmojiRecord('\U0001f5e8\ufe0f', 'left speech bubble', Status.FULLY_QUALIFIED, '2.0', '\U0001f5e8\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f5e8': EmojiRecord('\U0001f5e8', 'left speech bubble', Status.UNQUALIFIED, '2.0', '\U0001f5e8\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f5ef\ufe0f': EmojiRecord('\U0001f5ef\ufe0f', 'right anger bubble', Status.FULLY_QUALIFIED, '0.7', '\U0001f5ef\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f5ef': EmojiRecord('\U0001f5ef', 'right anger bubble', Status.UNQUALIFIED, '0.7', '\U0001f5ef\ufe0f', 'Smileys & Emotion', 'emotion'),
    '\U0001f4ad': EmojiRecord('\U0001f4ad', 'thought balloon', Status.FULLY_QUALIFIED, '1.0', '\U0001f4ad', 'Smileys & Emotion', 'emotion'),
    '\U0001f4a4': EmojiRecord('\U0001f4a4', 'ZZZ', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a4', 'Smileys & Emotion', 'emotion'),
    '\U0001f44b': EmojiRecord('\U0001f44b', 'waving hand', Status.FULLY_QUALIFIED, '0.6', '\U0001f44b', 'People & Body', 'hand-fingers-open'),
    '\U0001f44b\U0001f3fb': EmojiRecord('\U0001f44b\U0001f3fb', 'waving hand: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44b\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001f44b\U0001f3fc': EmojiRecord('\U0001f44b\U0001f3fc', 'waving hand: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44b\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001f44b\U0001f3fd': EmojiRecord('\U0001f44b\U0001f3fd', 'waving hand: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44b\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001f44b\U0001f3fe': EmojiRecord('\U0001f44b\U0001f3fe', 'waving hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44b\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001f44b\U0001f3ff': EmojiRecord('\U0001f44b\U0001f3ff', 'waving hand: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44b\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001f91a': EmojiRecord('\U0001f91a', 'raised back of hand', Status.FULLY_QUALIFIED, '3.0', '\U0001f91a', 'People & Body', 'hand-fingers-open'),
    '\U0001f91a\U0001f3fb': EmojiRecord('\U0001f91a\U0001f3fb', 'raised back of hand: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91a\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001f91a\U0001f3fc': EmojiRecord('\U0001f91a\U0001f3fc', 'raised back of hand: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91a\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001f91a\U0001f3fd': EmojiRecord('\U0001f91a\U0001f3fd', 'raised back of hand: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91a\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001f91a\U0001f3fe': EmojiRecord('\U0001f91a\U0001f3fe', 'raised back of hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91a\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001f91a\U0001f3ff': EmojiRecord('\U0001f91a\U0001f3ff', 'raised back of hand: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91a\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001f590\ufe0f': EmojiRecord('\U0001f590\ufe0f', 'hand with fingers splayed', Status.FULLY_QUALIFIED, '0.7', '\U0001f590\ufe0f', 'People & Body', 'hand-fingers-open'),
    '\U0001f590': EmojiRecord('\U0001f590', 'hand with fingers splayed', Status.UNQUALIFIED, '0.7', '\U0001f590\ufe0f', 'People & Body', 'hand-fingers-open'),
    '\U0001f590\U0001f3fb': EmojiRecord('\U0001f590\U0001f3fb', 'hand with fingers splayed: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f590\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001f590\U0001f3fc': EmojiRecord('\U0001f590\U0001f3fc', 'hand with fingers splayed: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f590\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001f590\U0001f3fd': EmojiRecord('\U0001f590\U0001f3fd', 'hand with fingers splayed: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f590\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001f590\U0001f3fe': EmojiRecord('\U0001f590\U0001f3fe', 'hand with fingers splayed: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f590\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001f590\U0001f3ff': EmojiRecord('\U0001f590\U0001f3ff', 'hand with fingers splayed: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f590\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\u270b': EmojiRecord('\u270b', 'raised hand', Status.FULLY_QUALIFIED, '0.6', '\u270b', 'People & Body', 'hand-fingers-open'),
    '\u270b\U0001f3fb': EmojiRecord('\u270b\U0001f3fb', 'raised hand: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270b\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\u270b\U0001f3fc': EmojiRecord('\u270b\U0001f3fc', 'raised hand: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270b\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\u270b\U0001f3fd': EmojiRecord('\u270b\U0001f3fd', 'raised hand: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270b\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\u270b\U0001f3fe': EmojiRecord('\u270b\U0001f3fe', 'raised hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270b\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\u270b\U0001f3ff': EmojiRecord('\u270b\U0001f3ff', 'raised hand: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270b\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001f596': EmojiRecord('\U0001f596', 'vulcan salute', Status.FULLY_QUALIFIED, '1.0', '\U0001f596', 'People & Body', 'hand-fingers-open'),
    '\U0001f596\U0001f3fb': EmojiRecord('\U0001f596\U0001f3fb', 'vulcan salute: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f596\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001f596\U0001f3fc': EmojiRecord('\U0001f596\U0001f3fc', 'vulcan salute: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f596\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001f596\U0001f3fd': EmojiRecord('\U0001f596\U0001f3fd', 'vulcan salute: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f596\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001f596\U0001f3fe': EmojiRecord('\U0001f596\U0001f3fe', 'vulcan salute: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f596\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001f596\U0001f3ff': EmojiRecord('\U0001f596\U0001f3ff', 'vulcan salute: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f596\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001faf1': EmojiRecord('\U0001faf1', 'rightwards hand', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1', 'People & Body', 'hand-fingers-open'),
    '\U0001faf1\U0001f3fb': EmojiRecord('\U0001faf1\U0001f3fb', 'rightwards hand: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001faf1\U0001f3fc': EmojiRecord('\U0001faf1\U0001f3fc', 'rightwards hand: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001faf1\U0001f3fd': EmojiRecord('\U0001faf1\U0001f3fd', 'rightwards hand: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001faf1\U0001f3fe': EmojiRecord('\U0001faf1\U0001f3fe', 'rightwards hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001faf1\U0001f3ff': EmojiRecord('\U0001faf1\U0001f3ff', 'rightwards hand: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001faf2': EmojiRecord('\U0001faf2', 'leftwards hand', Status.FULLY_QUALIFIED, '14.0', '\U0001faf2', 'People & Body', 'hand-fingers-open'),
    '\U0001faf2\U0001f3fb': EmojiRecord('\U0001faf2\U0001f3fb', 'leftwards hand: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf2\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001faf2\U0001f3fc': EmojiRecord('\U0001faf2\U0001f3fc', 'leftwards hand: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf2\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001faf2\U0001f3fd': EmojiRecord('\U0001faf2\U0001f3fd', 'leftwards hand: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf2\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001faf2\U0001f3fe': EmojiRecord('\U0001faf2\U0001f3fe', 'leftwards hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf2\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001faf2\U0001f3ff': EmojiRecord('\U0001faf2\U0001f3ff', 'leftwards hand: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf2\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001faf3': EmojiRecord('\U0001faf3', 'palm down hand', Status.FULLY_QUALIFIED, '14.0', '\U0001faf3', 'People & Body', 'hand-fingers-open'),
    '\U0001faf3\U0001f3fb': EmojiRecord('\U0001faf3\U0001f3fb', 'palm down hand: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf3\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001faf3\U0001f3fc': EmojiRecord('\U0001faf3\U0001f3fc', 'palm down hand: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf3\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001faf3\U0001f3fd': EmojiRecord('\U0001faf3\U0001f3fd', 'palm down hand: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf3\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001faf3\U0001f3fe': EmojiRecord('\U0001faf3\U0001f3fe', 'palm down hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf3\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001faf3\U0001f3ff': EmojiRecord('\U0001faf3\U0001f3ff', 'palm down hand: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf3\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001faf4': EmojiRecord('\U0001faf4', 'palm up hand', Status.FULLY_QUALIFIED, '14.0', '\U0001faf4', 'People & Body', 'hand-fingers-open'),
    '\U0001faf4\U0001f3fb': EmojiRecord('\U0001faf4\U0001f3fb', 'palm up hand: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf4\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001faf4\U0001f3fc': EmojiRecord('\U0001faf4\U0001f3fc', 'palm up hand: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf4\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001faf4\U0001f3fd': EmojiRecord('\U0001faf4\U0001f3fd', 'palm up hand: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf4\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001faf4\U0001f3fe': EmojiRecord('\U0001faf4\U0001f3fe', 'palm up hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf4\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001faf4\U0001f3ff': EmojiRecord('\U0001faf4\U0001f3ff', 'palm up hand: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf4\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001faf7': EmojiRecord('\U0001faf7', 'leftwards pushing hand', Status.FULLY_QUALIFIED, '15.0', '\U0001faf7', 'People & Body', 'hand-fingers-open'),
    '\U0001faf7\U0001f3fb': EmojiRecord('\U0001faf7\U0001f3fb', 'leftwards pushing hand: light skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf7\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001faf7\U0001f3fc': EmojiRecord('\U0001faf7\U0001f3fc', 'leftwards pushing hand: medium-light skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf7\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001faf7\U0001f3fd': EmojiRecord('\U0001faf7\U0001f3fd', 'leftwards pushing hand: medium skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf7\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001faf7\U0001f3fe': EmojiRecord('\U0001faf7\U0001f3fe', 'leftwards pushing hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf7\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001faf7\U0001f3ff': EmojiRecord('\U0001faf7\U0001f3ff', 'leftwards pushing hand: dark skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf7\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001faf8': EmojiRecord('\U0001faf8', 'rightwards pushing hand', Status.FULLY_QUALIFIED, '15.0', '\U0001faf8', 'People & Body', 'hand-fingers-open'),
    '\U0001faf8\U0001f3fb': EmojiRecord('\U0001faf8\U0001f3fb', 'rightwards pushing hand: light skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf8\U0001f3fb', 'People & Body', 'hand-fingers-open'),
    '\U0001faf8\U0001f3fc': EmojiRecord('\U0001faf8\U0001f3fc', 'rightwards pushing hand: medium-light skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf8\U0001f3fc', 'People & Body', 'hand-fingers-open'),
    '\U0001faf8\U0001f3fd': EmojiRecord('\U0001faf8\U0001f3fd', 'rightwards pushing hand: medium skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf8\U0001f3fd', 'People & Body', 'hand-fingers-open'),
    '\U0001faf8\U0001f3fe': EmojiRecord('\U0001faf8\U0001f3fe', 'rightwards pushing hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf8\U0001f3fe', 'People & Body', 'hand-fingers-open'),
    '\U0001faf8\U0001f3ff': EmojiRecord('\U0001faf8\U0001f3ff', 'rightwards pushing hand: dark skin tone', Status.FULLY_QUALIFIED, '15.0', '\U0001faf8\U0001f3ff', 'People & Body', 'hand-fingers-open'),
    '\U0001f44c': EmojiRecord('\U0001f44c', 'OK hand', Status.FULLY_QUALIFIED, '0.6', '\U0001f44c', 'People & Body', 'hand-fingers-partial'),
    '\U0001f44c\U0001f3fb': EmojiRecord('\U0001f44c\U0001f3fb', 'OK hand: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44c\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001f44c\U0001f3fc': EmojiRecord('\U0001f44c\U0001f3fc', 'OK hand: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44c\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001f44c\U0001f3fd': EmojiRecord('\U0001f44c\U0001f3fd', 'OK hand: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44c\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001f44c\U0001f3fe': EmojiRecord('\U0001f44c\U0001f3fe', 'OK hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44c\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001f44c\U0001f3ff': EmojiRecord('\U0001f44c\U0001f3ff', 'OK hand: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44c\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90c': EmojiRecord('\U0001f90c', 'pinched fingers', Status.FULLY_QUALIFIED, '13.0', '\U0001f90c', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90c\U0001f3fb': EmojiRecord('\U0001f90c\U0001f3fb', 'pinched fingers: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f90c\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90c\U0001f3fc': EmojiRecord('\U0001f90c\U0001f3fc', 'pinched fingers: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f90c\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90c\U0001f3fd': EmojiRecord('\U0001f90c\U0001f3fd', 'pinched fingers: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f90c\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90c\U0001f3fe': EmojiRecord('\U0001f90c\U0001f3fe', 'pinched fingers: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f90c\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90c\U0001f3ff': EmojiRecord('\U0001f90c\U0001f3ff', 'pinched fingers: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f90c\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90f': EmojiRecord('\U0001f90f', 'pinching hand', Status.FULLY_QUALIFIED, '12.0', '\U0001f90f', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90f\U0001f3fb': EmojiRecord('\U0001f90f\U0001f3fb', 'pinching hand: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f90f\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90f\U0001f3fc': EmojiRecord('\U0001f90f\U0001f3fc', 'pinching hand: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f90f\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90f\U0001f3fd': EmojiRecord('\U0001f90f\U0001f3fd', 'pinching hand: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f90f\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90f\U0001f3fe': EmojiRecord('\U0001f90f\U0001f3fe', 'pinching hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f90f\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001f90f\U0001f3ff': EmojiRecord('\U0001f90f\U0001f3ff', 'pinching hand: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f90f\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\u270c\ufe0f': EmojiRecord('\u270c\ufe0f', 'victory hand', Status.FULLY_QUALIFIED, '0.6', '\u270c\ufe0f', 'People & Body', 'hand-fingers-partial'),
    '\u270c': EmojiRecord('\u270c', 'victory hand', Status.UNQUALIFIED, '0.6', '\u270c\ufe0f', 'People & Body', 'hand-fingers-partial'),
    '\u270c\U0001f3fb': EmojiRecord('\u270c\U0001f3fb', 'victory hand: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270c\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\u270c\U0001f3fc': EmojiRecord('\u270c\U0001f3fc', 'victory hand: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270c\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\u270c\U0001f3fd': EmojiRecord('\u270c\U0001f3fd', 'victory hand: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270c\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\u270c\U0001f3fe': EmojiRecord('\u270c\U0001f3fe', 'victory hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270c\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\u270c\U0001f3ff': EmojiRecord('\u270c\U0001f3ff', 'victory hand: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270c\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91e': EmojiRecord('\U0001f91e', 'crossed fingers', Status.FULLY_QUALIFIED, '3.0', '\U0001f91e', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91e\U0001f3fb': EmojiRecord('\U0001f91e\U0001f3fb', 'crossed fingers: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91e\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91e\U0001f3fc': EmojiRecord('\U0001f91e\U0001f3fc', 'crossed fingers: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91e\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91e\U0001f3fd': EmojiRecord('\U0001f91e\U0001f3fd', 'crossed fingers: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91e\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91e\U0001f3fe': EmojiRecord('\U0001f91e\U0001f3fe', 'crossed fingers: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91e\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91e\U0001f3ff': EmojiRecord('\U0001f91e\U0001f3ff', 'crossed fingers: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91e\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001faf0': EmojiRecord('\U0001faf0', 'hand with index finger and thumb crossed', Status.FULLY_QUALIFIED, '14.0', '\U0001faf0', 'People & Body', 'hand-fingers-partial'),
    '\U0001faf0\U0001f3fb': EmojiRecord('\U0001faf0\U0001f3fb', 'hand with index finger and thumb crossed: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf0\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001faf0\U0001f3fc': EmojiRecord('\U0001faf0\U0001f3fc', 'hand with index finger and thumb crossed: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf0\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001faf0\U0001f3fd': EmojiRecord('\U0001faf0\U0001f3fd', 'hand with index finger and thumb crossed: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf0\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001faf0\U0001f3fe': EmojiRecord('\U0001faf0\U0001f3fe', 'hand with index finger and thumb crossed: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf0\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001faf0\U0001f3ff': EmojiRecord('\U0001faf0\U0001f3ff', 'hand with index finger and thumb crossed: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf0\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91f': EmojiRecord('\U0001f91f', 'love-you gesture', Status.FULLY_QUALIFIED, '5.0', '\U0001f91f', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91f\U0001f3fb': EmojiRecord('\U0001f91f\U0001f3fb', 'love-you gesture: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f91f\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91f\U0001f3fc': EmojiRecord('\U0001f91f\U0001f3fc', 'love-you gesture: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f91f\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91f\U0001f3fd': EmojiRecord('\U0001f91f\U0001f3fd', 'love-you gesture: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f91f\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91f\U0001f3fe': EmojiRecord('\U0001f91f\U0001f3fe', 'love-you gesture: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f91f\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001f91f\U0001f3ff': EmojiRecord('\U0001f91f\U0001f3ff', 'love-you gesture: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f91f\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001f918': EmojiRecord('\U0001f918', 'sign of the horns', Status.FULLY_QUALIFIED, '1.0', '\U0001f918', 'People & Body', 'hand-fingers-partial'),
    '\U0001f918\U0001f3fb': EmojiRecord('\U0001f918\U0001f3fb', 'sign of the horns: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f918\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001f918\U0001f3fc': EmojiRecord('\U0001f918\U0001f3fc', 'sign of the horns: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f918\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001f918\U0001f3fd': EmojiRecord('\U0001f918\U0001f3fd', 'sign of the horns: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f918\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001f918\U0001f3fe': EmojiRecord('\U0001f918\U0001f3fe', 'sign of the horns: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f918\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001f918\U0001f3ff': EmojiRecord('\U0001f918\U0001f3ff', 'sign of the horns: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f918\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001f919': EmojiRecord('\U0001f919', 'call me hand', Status.FULLY_QUALIFIED, '3.0', '\U0001f919', 'People & Body', 'hand-fingers-partial'),
    '\U0001f919\U0001f3fb': EmojiRecord('\U0001f919\U0001f3fb', 'call me hand: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f919\U0001f3fb', 'People & Body', 'hand-fingers-partial'),
    '\U0001f919\U0001f3fc': EmojiRecord('\U0001f919\U0001f3fc', 'call me hand: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f919\U0001f3fc', 'People & Body', 'hand-fingers-partial'),
    '\U0001f919\U0001f3fd': EmojiRecord('\U0001f919\U0001f3fd', 'call me hand: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f919\U0001f3fd', 'People & Body', 'hand-fingers-partial'),
    '\U0001f919\U0001f3fe': EmojiRecord('\U0001f919\U0001f3fe', 'call me hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f919\U0001f3fe', 'People & Body', 'hand-fingers-partial'),
    '\U0001f919\U0001f3ff': EmojiRecord('\U0001f919\U0001f3ff', 'call me hand: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f919\U0001f3ff', 'People & Body', 'hand-fingers-partial'),
    '\U0001f448': EmojiRecord('\U0001f448', 'backhand index pointing left', Status.FULLY_QUALIFIED, '0.6', '\U0001f448', 'People & Body', 'hand-single-finger'),
    '\U0001f448\U0001f3fb': EmojiRecord('\U0001f448\U0001f3fb', 'backhand index pointing left: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f448\U0001f3fb', 'People & Body', 'hand-single-finger'),
    '\U0001f448\U0001f3fc': EmojiRecord('\U0001f448\U0001f3fc', 'backhand index pointing left: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f448\U0001f3fc', 'People & Body', 'hand-single-finger'),
    '\U0001f448\U0001f3fd': EmojiRecord('\U0001f448\U0001f3fd', 'backhand index pointing left: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f448\U0001f3fd', 'People & Body', 'hand-single-finger'),
    '\U0001f448\U0001f3fe': EmojiRecord('\U0001f448\U0001f3fe', 'backhand index pointing left: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f448\U0001f3fe', 'People & Body', 'hand-single-finger'),
    '\U0001f448\U0001f3ff': EmojiRecord('\U0001f448\U0001f3ff', 'backhand index pointing left: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f448\U0001f3ff', 'People & Body', 'hand-single-finger'),
    '\U0001f449': EmojiRecord('\U0001f449', 'backhand index pointing right', Status.FULLY_QUALIFIED, '0.6', '\U0001f449', 'People & Body', 'hand-single-finger'),
    '\U0001f449\U0001f3fb': EmojiRecord('\U0001f449\U0001f3fb', 'backhand index pointing right: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f449\U0001f3fb', 'People & Body', 'hand-single-finger'),
    '\U0001f449\U0001f3fc': EmojiRecord('\U0001f449\U0001f3fc', 'backhand index pointing right: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f449\U0001f3fc', 'People & Body', 'hand-single-finger'),
    '\U0001f449\U0001f3fd': EmojiRecord('\U0001f449\U0001f3fd', 'backhand index pointing right: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f449\U0001f3fd', 'People & Body', 'hand-single-finger'),
    '\U0001f449\U0001f3fe': EmojiRecord('\U0001f449\U0001f3fe', 'backhand index pointing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f449\U0001f3fe', 'People & Body', 'hand-single-finger'),
    '\U0001f449\U0001f3ff': EmojiRecord('\U0001f449\U0001f3ff', 'backhand index pointing right: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f449\U0001f3ff', 'People & Body', 'hand-single-finger'),
    '\U0001f446': EmojiRecord('\U0001f446', 'backhand index pointing up', Status.FULLY_QUALIFIED, '0.6', '\U0001f446', 'People & Body', 'hand-single-finger'),
    '\U0001f446\U0001f3fb': EmojiRecord('\U0001f446\U0001f3fb', 'backhand index pointing up: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f446\U0001f3fb', 'People & Body', 'hand-single-finger'),
    '\U0001f446\U0001f3fc': EmojiRecord('\U0001f446\U0001f3fc', 'backhand index pointing up: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f446\U0001f3fc', 'People & Body', 'hand-single-finger'),
    '\U0001f446\U0001f3fd': EmojiRecord('\U0001f446\U0001f3fd', 'backhand index pointing up: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f446\U0001f3fd', 'People & Body', 'hand-single-finger'),
    '\U0001f446\U0001f3fe': EmojiRecord('\U0001f446\U0001f3fe', 'backhand index pointing up: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f446\U0001f3fe', 'People & Body', 'hand-single-finger'),
    '\U0001f446\U0001f3ff': EmojiRecord('\U0001f446\U0001f3ff', 'backhand index pointing up: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f446\U0001f3ff', 'People & Body', 'hand-single-finger'),
    '\U0001f595': EmojiRecord('\U0001f595', 'middle finger', Status.FULLY_QUALIFIED, '1.0', '\U0001f595', 'People & Body', 'hand-single-finger'),
    '\U0001f595\U0001f3fb': EmojiRecord('\U0001f595\U0001f3fb', 'middle finger: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f595\U0001f3fb', 'People & Body', 'hand-single-finger'),
    '\U0001f595\U0001f3fc': EmojiRecord('\U0001f595\U0001f3fc', 'middle finger: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f595\U0001f3fc', 'People & Body', 'hand-single-finger'),
    '\U0001f595\U0001f3fd': EmojiRecord('\U0001f595\U0001f3fd', 'middle finger: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f595\U0001f3fd', 'People & Body', 'hand-single-finger'),
    '\U0001f595\U0001f3fe': EmojiRecord('\U0001f595\U0001f3fe', 'middle finger: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f595\U0001f3fe', 'People & Body', 'hand-single-finger'),
    '\U0001f595\U0001f3ff': EmojiRecord('\U0001f595\U0001f3ff', 'middle finger: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f595\U0001f3ff', 'People & Body', 'hand-single-finger'),
    '\U0001f447': EmojiRecord('\U0001f447', 'backhand index pointing down', Status.FULLY_QUALIFIED, '0.6', '\U0001f447', 'People & Body', 'hand-single-finger'),
    '\U0001f447\U0001f3fb': EmojiRecord('\U0001f447\U0001f3fb', 'backhand index pointing down: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f447\U0001f3fb', 'People & Body', 'hand-single-finger'),
    '\U0001f447\U0001f3fc': EmojiRecord('\U0001f447\U0001f3fc', 'backhand index pointing down: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f447\U0001f3fc', 'People & Body', 'hand-single-finger'),
    '\U0001f447\U0001f3fd': EmojiRecord('\U0001f447\U0001f3fd', 'backhand index pointing down: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f447\U0001f3fd', 'People & Body', 'hand-single-finger'),
    '\U0001f447\U0001f3fe': EmojiRecord('\U0001f447\U0001f3fe', 'backhand index pointing down: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f447\U0001f3fe', 'People & Body', 'hand-single-finger'),
    '\U0001f447\U0001f3ff': EmojiRecord('\U0001f447\U0001f3ff', 'backhand index pointing down: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f447\U0001f3ff', 'People & Body', 'hand-single-finger'),
    '\u261d\ufe0f': EmojiRecord('\u261d\ufe0f', 'index pointing up', Status.FULLY_QUALIFIED, '0.6', '\u261d\ufe0f', 'People & Body', 'hand-single-finger'),
    '\u261d': EmojiRecord('\u261d', 'index pointing up', Status.UNQUALIFIED, '0.6', '\u261d\ufe0f', 'People & Body', 'hand-single-finger'),
    '\u261d\U0001f3fb': EmojiRecord('\u261d\U0001f3fb', 'index pointing up: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u261d\U0001f3fb', 'People & Body', 'hand-single-finger'),
    '\u261d\U0001f3fc': EmojiRecord('\u261d\U0001f3fc', 'index pointing up: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u261d\U0001f3fc', 'People & Body', 'hand-single-finger'),
    '\u261d\U0001f3fd': EmojiRecord('\u261d\U0001f3fd', 'index pointing up: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\u261d\U0001f3fd', 'People & Body', 'hand-single-finger'),
    '\u261d\U0001f3fe': EmojiRecord('\u261d\U0001f3fe', 'index pointing up: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u261d\U0001f3fe', 'People & Body', 'hand-single-finger'),
    '\u261d\U0001f3ff': EmojiRecord('\u261d\U0001f3ff', 'index pointing up: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u261d\U0001f3ff', 'People & Body', 'hand-single-finger'),
    '\U0001faf5': EmojiRecord('\U0001faf5', 'index pointing at the viewer', Status.FULLY_QUALIFIED, '14.0', '\U0001faf5', 'People & Body', 'hand-single-finger'),
    '\U0001faf5\U0001f3fb': EmojiRecord('\U0001faf5\U0001f3fb', 'index pointing at the viewer: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf5\U0001f3fb', 'People & Body', 'hand-single-finger'),
    '\U0001faf5\U0001f3fc': EmojiRecord('\U0001faf5\U0001f3fc', 'index pointing at the viewer: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf5\U0001f3fc', 'People & Body', 'hand-single-finger'),
    '\U0001faf5\U0001f3fd': EmojiRecord('\U0001faf5\U0001f3fd', 'index pointing at the viewer: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf5\U0001f3fd', 'People & Body', 'hand-single-finger'),
    '\U0001faf5\U0001f3fe': EmojiRecord('\U0001faf5\U0001f3fe', 'index pointing at the viewer: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf5\U0001f3fe', 'People & Body', 'hand-single-finger'),
    '\U0001faf5\U0001f3ff': EmojiRecord('\U0001faf5\U0001f3ff', 'index pointing at the viewer: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf5\U0001f3ff', 'People & Body', 'hand-single-finger'),
    '\U0001f44d': EmojiRecord('\U0001f44d', 'thumbs up', Status.FULLY_QUALIFIED, '0.6', '\U0001f44d', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44d\U0001f3fb': EmojiRecord('\U0001f44d\U0001f3fb', 'thumbs up: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44d\U0001f3fb', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44d\U0001f3fc': EmojiRecord('\U0001f44d\U0001f3fc', 'thumbs up: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44d\U0001f3fc', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44d\U0001f3fd': EmojiRecord('\U0001f44d\U0001f3fd', 'thumbs up: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44d\U0001f3fd', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44d\U0001f3fe': EmojiRecord('\U0001f44d\U0001f3fe', 'thumbs up: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44d\U0001f3fe', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44d\U0001f3ff': EmojiRecord('\U0001f44d\U0001f3ff', 'thumbs up: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44d\U0001f3ff', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44e': EmojiRecord('\U0001f44e', 'thumbs down', Status.FULLY_QUALIFIED, '0.6', '\U0001f44e', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44e\U0001f3fb': EmojiRecord('\U0001f44e\U0001f3fb', 'thumbs down: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44e\U0001f3fb', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44e\U0001f3fc': EmojiRecord('\U0001f44e\U0001f3fc', 'thumbs down: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44e\U0001f3fc', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44e\U0001f3fd': EmojiRecord('\U0001f44e\U0001f3fd', 'thumbs down: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44e\U0001f3fd', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44e\U0001f3fe': EmojiRecord('\U0001f44e\U0001f3fe', 'thumbs down: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44e\U0001f3fe', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44e\U0001f3ff': EmojiRecord('\U0001f44e\U0001f3ff', 'thumbs down: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44e\U0001f3ff', 'People & Body', 'hand-fingers-closed'),
    '\u270a': EmojiRecord('\u270a', 'raised fist', Status.FULLY_QUALIFIED, '0.6', '\u270a', 'People & Body', 'hand-fingers-closed'),
    '\u270a\U0001f3fb': EmojiRecord('\u270a\U0001f3fb', 'raised fist: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270a\U0001f3fb', 'People & Body', 'hand-fingers-closed'),
    '\u270a\U0001f3fc': EmojiRecord('\u270a\U0001f3fc', 'raised fist: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270a\U0001f3fc', 'People & Body', 'hand-fingers-closed'),
    '\u270a\U0001f3fd': EmojiRecord('\u270a\U0001f3fd', 'raised fist: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270a\U0001f3fd', 'People & Body', 'hand-fingers-closed'),
    '\u270a\U0001f3fe': EmojiRecord('\u270a\U0001f3fe', 'raised fist: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270a\U0001f3fe', 'People & Body', 'hand-fingers-closed'),
    '\u270a\U0001f3ff': EmojiRecord('\u270a\U0001f3ff', 'raised fist: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270a\U0001f3ff', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44a': EmojiRecord('\U0001f44a', 'oncoming fist', Status.FULLY_QUALIFIED, '0.6', '\U0001f44a', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44a\U0001f3fb': EmojiRecord('\U0001f44a\U0001f3fb', 'oncoming fist: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44a\U0001f3fb', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44a\U0001f3fc': EmojiRecord('\U0001f44a\U0001f3fc', 'oncoming fist: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44a\U0001f3fc', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44a\U0001f3fd': EmojiRecord('\U0001f44a\U0001f3fd', 'oncoming fist: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44a\U0001f3fd', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44a\U0001f3fe': EmojiRecord('\U0001f44a\U0001f3fe', 'oncoming fist: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44a\U0001f3fe', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44a\U0001f3ff': EmojiRecord('\U0001f44a\U0001f3ff', 'oncoming fist: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44a\U0001f3ff', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91b': EmojiRecord('\U0001f91b', 'left-facing fist', Status.FULLY_QUALIFIED, '3.0', '\U0001f91b', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91b\U0001f3fb': EmojiRecord('\U0001f91b\U0001f3fb', 'left-facing fist: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91b\U0001f3fb', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91b\U0001f3fc': EmojiRecord('\U0001f91b\U0001f3fc', 'left-facing fist: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91b\U0001f3fc', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91b\U0001f3fd': EmojiRecord('\U0001f91b\U0001f3fd', 'left-facing fist: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91b\U0001f3fd', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91b\U0001f3fe': EmojiRecord('\U0001f91b\U0001f3fe', 'left-facing fist: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91b\U0001f3fe', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91b\U0001f3ff': EmojiRecord('\U0001f91b\U0001f3ff', 'left-facing fist: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91b\U0001f3ff', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91c': EmojiRecord('\U0001f91c', 'right-facing fist', Status.FULLY_QUALIFIED, '3.0', '\U0001f91c', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91c\U0001f3fb': EmojiRecord('\U0001f91c\U0001f3fb', 'right-facing fist: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91c\U0001f3fb', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91c\U0001f3fc': EmojiRecord('\U0001f91c\U0001f3fc', 'right-facing fist: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91c\U0001f3fc', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91c\U0001f3fd': EmojiRecord('\U0001f91c\U0001f3fd', 'right-facing fist: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91c\U0001f3fd', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91c\U0001f3fe': EmojiRecord('\U0001f91c\U0001f3fe', 'right-facing fist: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91c\U0001f3fe', 'People & Body', 'hand-fingers-closed'),
    '\U0001f91c\U0001f3ff': EmojiRecord('\U0001f91c\U0001f3ff', 'right-facing fist: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f91c\U0001f3ff', 'People & Body', 'hand-fingers-closed'),
    '\U0001f44f': EmojiRecord('\U0001f44f', 'clapping hands', Status.FULLY_QUALIFIED, '0.6', '\U0001f44f', 'People & Body', 'hands'),
    '\U0001f44f\U0001f3fb': EmojiRecord('\U0001f44f\U0001f3fb', 'clapping hands: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44f\U0001f3fb', 'People & Body', 'hands'),
    '\U0001f44f\U0001f3fc': EmojiRecord('\U0001f44f\U0001f3fc', 'clapping hands: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44f\U0001f3fc', 'People & Body', 'hands'),
    '\U0001f44f\U0001f3fd': EmojiRecord('\U0001f44f\U0001f3fd', 'clapping hands: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44f\U0001f3fd', 'People & Body', 'hands'),
    '\U0001f44f\U0001f3fe': EmojiRecord('\U0001f44f\U0001f3fe', 'clapping hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44f\U0001f3fe', 'People & Body', 'hands'),
    '\U0001f44f\U0001f3ff': EmojiRecord('\U0001f44f\U0001f3ff', 'clapping hands: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f44f\U0001f3ff', 'People & Body', 'hands'),
    '\U0001f64c': EmojiRecord('\U0001f64c', 'raising hands', Status.FULLY_QUALIFIED, '0.6', '\U0001f64c', 'People & Body', 'hands'),
    '\U0001f64c\U0001f3fb': EmojiRecord('\U0001f64c\U0001f3fb', 'raising hands: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64c\U0001f3fb', 'People & Body', 'hands'),
    '\U0001f64c\U0001f3fc': EmojiRecord('\U0001f64c\U0001f3fc', 'raising hands: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64c\U0001f3fc', 'People & Body', 'hands'),
    '\U0001f64c\U0001f3fd': EmojiRecord('\U0001f64c\U0001f3fd', 'raising hands: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64c\U0001f3fd', 'People & Body', 'hands'),
    '\U0001f64c\U0001f3fe': EmojiRecord('\U0001f64c\U0001f3fe', 'raising hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64c\U0001f3fe', 'People & Body', 'hands'),
    '\U0001f64c\U0001f3ff': EmojiRecord('\U0001f64c\U0001f3ff', 'raising hands: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64c\U0001f3ff', 'People & Body', 'hands'),
    '\U0001faf6': EmojiRecord('\U0001faf6', 'heart hands', Status.FULLY_QUALIFIED, '14.0', '\U0001faf6', 'People & Body', 'hands'),
    '\U0001faf6\U0001f3fb': EmojiRecord('\U0001faf6\U0001f3fb', 'heart hands: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf6\U0001f3fb', 'People & Body', 'hands'),
    '\U0001faf6\U0001f3fc': EmojiRecord('\U0001faf6\U0001f3fc', 'heart hands: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf6\U0001f3fc', 'People & Body', 'hands'),
    '\U0001faf6\U0001f3fd': EmojiRecord('\U0001faf6\U0001f3fd', 'heart hands: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf6\U0001f3fd', 'People & Body', 'hands'),
    '\U0001faf6\U0001f3fe': EmojiRecord('\U0001faf6\U0001f3fe', 'heart hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf6\U0001f3fe', 'People & Body', 'hands'),
    '\U0001faf6\U0001f3ff': EmojiRecord('\U0001faf6\U0001f3ff', 'heart hands: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf6\U0001f3ff', 'People & Body', 'hands'),
    '\U0001f450': EmojiRecord('\U0001f450', 'open hands', Status.FULLY_QUALIFIED, '0.6', '\U0001f450', 'People & Body', 'hands'),
    '\U0001f450\U0001f3fb': EmojiRecord('\U0001f450\U0001f3fb', 'open hands: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f450\U0001f3fb', 'People & Body', 'hands'),
    '\U0001f450\U0001f3fc': EmojiRecord('\U0001f450\U0001f3fc', 'open hands: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f450\U0001f3fc', 'People & Body', 'hands'),
    '\U0001f450\U0001f3fd': EmojiRecord('\U0001f450\U0001f3fd', 'open hands: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f450\U0001f3fd', 'People & Body', 'hands'),
    '\U0001f450\U0001f3fe': EmojiRecord('\U0001f450\U0001f3fe', 'open hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f450\U0001f3fe', 'People & Body', 'hands'),
    '\U0001f450\U0001f3ff': EmojiRecord('\U0001f450\U0001f3ff', 'open hands: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f450\U0001f3ff', 'People & Body', 'hands'),
    '\U0001f932': EmojiRecord('\U0001f932', 'palms up together', Status.FULLY_QUALIFIED, '5.0', '\U0001f932', 'People & Body', 'hands'),
    '\U0001f932\U0001f3fb': EmojiRecord('\U0001f932\U0001f3fb', 'palms up together: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f932\U0001f3fb', 'People & Body', 'hands'),
    '\U0001f932\U0001f3fc': EmojiRecord('\U0001f932\U0001f3fc', 'palms up together: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f932\U0001f3fc', 'People & Body', 'hands'),
    '\U0001f932\U0001f3fd': EmojiRecord('\U0001f932\U0001f3fd', 'palms up together: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f932\U0001f3fd', 'People & Body', 'hands'),
    '\U0001f932\U0001f3fe': EmojiRecord('\U0001f932\U0001f3fe', 'palms up together: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f932\U0001f3fe', 'People & Body', 'hands'),
    '\U0001f932\U0001f3ff': EmojiRecord('\U0001f932\U0001f3ff', 'palms up together: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f932\U0001f3ff', 'People & Body', 'hands'),
    '\U0001f91d': EmojiRecord('\U0001f91d', 'handshake', Status.FULLY_QUALIFIED, '3.0', '\U0001f91d', 'People & Body', 'hands'),
    '\U0001f91d\U0001f3fb': EmojiRecord('\U0001f91d\U0001f3fb', 'handshake: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001f91d\U0001f3fb', 'People & Body', 'hands'),
    '\U0001f91d\U0001f3fc': EmojiRecord('\U0001f91d\U0001f3fc', 'handshake: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001f91d\U0001f3fc', 'People & Body', 'hands'),
    '\U0001f91d\U0001f3fd': EmojiRecord('\U0001f91d\U0001f3fd', 'handshake: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001f91d\U0001f3fd', 'People & Body', 'hands'),
    '\U0001f91d\U0001f3fe': EmojiRecord('\U0001f91d\U0001f3fe', 'handshake: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001f91d\U0001f3fe', 'People & Body', 'hands'),
    '\U0001f91d\U0001f3ff': EmojiRecord('\U0001f91d\U0001f3ff', 'handshake: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001f91d\U0001f3ff', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc': EmojiRecord('\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc', 'handshake: light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fd': EmojiRecord('\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fd', 'handshake: light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fd', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fe': EmojiRecord('\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fe', 'handshake: light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fe', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3ff': EmojiRecord('\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3ff', 'handshake: light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3ff', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fb': EmojiRecord('\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fb', 'handshake: medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fb', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fd': EmojiRecord('\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fd', 'handshake: medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fd', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fe': EmojiRecord('\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fe', 'handshake: medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fe', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3ff': EmojiRecord('\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3ff', 'handshake: medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3ff', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fb': EmojiRecord('\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fb', 'handshake: medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fb', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fc': EmojiRecord('\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fc', 'handshake: medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fc', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fe': EmojiRecord('\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fe', 'handshake: medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fe', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3ff': EmojiRecord('\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3ff', 'handshake: medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3ff', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fb': EmojiRecord('\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fb', 'handshake: medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fb', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fc': EmojiRecord('\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fc', 'handshake: medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fc', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fd': EmojiRecord('\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fd', 'handshake: medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fd', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3ff': EmojiRecord('\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3ff', 'handshake: medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3ff', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fb': EmojiRecord('\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fb', 'handshake: dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fb', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fc': EmojiRecord('\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fc', 'handshake: dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fc', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fd': EmojiRecord('\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fd', 'handshake: dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fd', 'People & Body', 'hands'),
    '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fe': EmojiRecord('\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fe', 'handshake: dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fe', 'People & Body', 'hands'),
    '\U0001f64f': EmojiRecord('\U0001f64f', 'folded hands', Status.FULLY_QUALIFIED, '0.6', '\U0001f64f', 'People & Body', 'hands'),
    '\U0001f64f\U0001f3fb': EmojiRecord('\U0001f64f\U0001f3fb', 'folded hands: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64f\U0001f3fb', 'People & Body', 'hands'),
    '\U0001f64f\U0001f3fc': EmojiRecord('\U0001f64f\U0001f3fc', 'folded hands: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64f\U0001f3fc', 'People & Body', 'hands'),
    '\U0001f64f\U0001f3fd': EmojiRecord('\U0001f64f\U0001f3fd', 'folded hands: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64f\U0001f3fd', 'People & Body', 'hands'),
    '\U0001f64f\U0001f3fe': EmojiRecord('\U0001f64f\U0001f3fe', 'folded hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64f\U0001f3fe', 'People & Body', 'hands'),
    '\U0001f64f\U0001f3ff': EmojiRecord('\U0001f64f\U0001f3ff', 'folded hands: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64f\U0001f3ff', 'People & Body', 'hands'),
    '\u270d\ufe0f': EmojiRecord('\u270d\ufe0f', 'writing hand', Status.FULLY_QUALIFIED, '0.7', '\u270d\ufe0f', 'People & Body', 'hand-prop'),
    '\u270d': EmojiRecord('\u270d', 'writing hand', Status.UNQUALIFIED, '0.7', '\u270d\ufe0f', 'People & Body', 'hand-prop'),
    '\u270d\U0001f3fb': EmojiRecord('\u270d\U0001f3fb', 'writing hand: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270d\U0001f3fb', 'People & Body', 'hand-prop'),
    '\u270d\U0001f3fc': EmojiRecord('\u270d\U0001f3fc', 'writing hand: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270d\U0001f3fc', 'People & Body', 'hand-prop'),
    '\u270d\U0001f3fd': EmojiRecord('\u270d\U0001f3fd', 'writing hand: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270d\U0001f3fd', 'People & Body', 'hand-prop'),
    '\u270d\U0001f3fe': EmojiRecord('\u270d\U0001f3fe', 'writing hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270d\U0001f3fe', 'People & Body', 'hand-prop'),
    '\u270d\U0001f3ff': EmojiRecord('\u270d\U0001f3ff', 'writing hand: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\u270d\U0001f3ff', 'People & Body', 'hand-prop'),
    '\U0001f485': EmojiRecord('\U0001f485', 'nail polish', Status.FULLY_QUALIFIED, '0.6', '\U0001f485', 'People & Body', 'hand-prop'),
    '\U0001f485\U0001f3fb': EmojiRecord('\U0001f485\U0001f3fb', 'nail polish: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f485\U0001f3fb', 'People & Body', 'hand-prop'),
    '\U0001f485\U0001f3fc': EmojiRecord('\U0001f485\U0001f3fc', 'nail polish: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f485\U0001f3fc', 'People & Body', 'hand-prop'),
    '\U0001f485\U0001f3fd': EmojiRecord('\U0001f485\U0001f3fd', 'nail polish: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f485\U0001f3fd', 'People & Body', 'hand-prop'),
    '\U0001f485\U0001f3fe': EmojiRecord('\U0001f485\U0001f3fe', 'nail polish: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f485\U0001f3fe', 'People & Body', 'hand-prop'),
    '\U0001f485\U0001f3ff': EmojiRecord('\U0001f485\U0001f3ff', 'nail polish: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f485\U0001f3ff', 'People & Body', 'hand-prop'),
    '\U0001f933': EmojiRecord('\U0001f933', 'selfie', Status.FULLY_QUALIFIED, '3.0', '\U0001f933', 'People & Body', 'hand-prop'),
    '\U0001f933\U0001f3fb': EmojiRecord('\U0001f933\U0001f3fb', 'selfie: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f933\U0001f3fb', 'People & Body', 'hand-prop'),
    '\U0001f933\U0001f3fc': EmojiRecord('\U0001f933\U0001f3fc', 'selfie: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f933\U0001f3fc', 'People & Body', 'hand-prop'),
    '\U0001f933\U0001f3fd': EmojiRecord('\U0001f933\U0001f3fd', 'selfie: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f933\U0001f3fd', 'People & Body', 'hand-prop'),
    '\U0001f933\U0001f3fe': EmojiRecord('\U0001f933\U0001f3fe', 'selfie: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f933\U0001f3fe', 'People & Body', 'hand-prop'),
    '\U0001f933\U0001f3ff': EmojiRecord('\U0001f933\U0001f3ff', 'selfie: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f933\U0001f3ff', 'People & Body', 'hand-prop'),
    '\U0001f4aa': EmojiRecord('\U0001f4aa', 'flexed biceps', Status.FULLY_QUALIFIED, '0.6', '\U0001f4aa', 'People & Body', 'body-parts'),
    '\U0001f4aa\U0001f3fb': EmojiRecord('\U0001f4aa\U0001f3fb', 'flexed biceps: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f4aa\U0001f3fb', 'People & Body', 'body-parts'),
    '\U0001f4aa\U0001f3fc': EmojiRecord('\U0001f4aa\U0001f3fc', 'flexed biceps: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f4aa\U0001f3fc', 'People & Body', 'body-parts'),
    '\U0001f4aa\U0001f3fd': EmojiRecord('\U0001f4aa\U0001f3fd', 'flexed biceps: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f4aa\U0001f3fd', 'People & Body', 'body-parts'),
    '\U0001f4aa\U0001f3fe': EmojiRecord('\U0001f4aa\U0001f3fe', 'flexed biceps: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f4aa\U0001f3fe', 'People & Body', 'body-parts'),
    '\U0001f4aa\U0001f3ff': EmojiRecord('\U0001f4aa\U0001f3ff', 'flexed biceps: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f4aa\U0001f3ff', 'People & Body', 'body-parts'),
    '\U0001f9be': EmojiRecord('\U0001f9be', 'mechanical arm', Status.FULLY_QUALIFIED, '12.0', '\U0001f9be', 'People & Body', 'body-parts'),
    '\U0001f9bf': EmojiRecord('\U0001f9bf', 'mechanical leg', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bf', 'People & Body', 'body-parts'),
    '\U0001f9b5': EmojiRecord('\U0001f9b5', 'leg', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b5', 'People & Body', 'body-parts'),
    '\U0001f9b5\U0001f3fb': EmojiRecord('\U0001f9b5\U0001f3fb', 'leg: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b5\U0001f3fb', 'People & Body', 'body-parts'),
    '\U0001f9b5\U0001f3fc': EmojiRecord('\U0001f9b5\U0001f3fc', 'leg: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b5\U0001f3fc', 'People & Body', 'body-parts'),
    '\U0001f9b5\U0001f3fd': EmojiRecord('\U0001f9b5\U0001f3fd', 'leg: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b5\U0001f3fd', 'People & Body', 'body-parts'),
    '\U0001f9b5\U0001f3fe': EmojiRecord('\U0001f9b5\U0001f3fe', 'leg: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b5\U0001f3fe', 'People & Body', 'body-parts'),
    '\U0001f9b5\U0001f3ff': EmojiRecord('\U0001f9b5\U0001f3ff', 'leg: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b5\U0001f3ff', 'People & Body', 'body-parts'),
    '\U0001f9b6': EmojiRecord('\U0001f9b6', 'foot', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b6', 'People & Body', 'body-parts'),
    '\U0001f9b6\U0001f3fb': EmojiRecord('\U0001f9b6\U0001f3fb', 'foot: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b6\U0001f3fb', 'People & Body', 'body-parts'),
    '\U0001f9b6\U0001f3fc': EmojiRecord('\U0001f9b6\U0001f3fc', 'foot: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b6\U0001f3fc', 'People & Body', 'body-parts'),
    '\U0001f9b6\U0001f3fd': EmojiRecord('\U0001f9b6\U0001f3fd', 'foot: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b6\U0001f3fd', 'People & Body', 'body-parts'),
    '\U0001f9b6\U0001f3fe': EmojiRecord('\U0001f9b6\U0001f3fe', 'foot: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b6\U0001f3fe', 'People & Body', 'body-parts'),
    '\U0001f9b6\U0001f3ff': EmojiRecord('\U0001f9b6\U0001f3ff', 'foot: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b6\U0001f3ff', 'People & Body', 'body-parts'),
    '\U0001f442': EmojiRecord('\U0001f442', 'ear', Status.FULLY_QUALIFIED, '0.6', '\U0001f442', 'People & Body', 'body-parts'),
    '\U0001f442\U0001f3fb': EmojiRecord('\U0001f442\U0001f3fb', 'ear: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f442\U0001f3fb', 'People & Body', 'body-parts'),
    '\U0001f442\U0001f3fc': EmojiRecord('\U0001f442\U0001f3fc', 'ear: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f442\U0001f3fc', 'People & Body', 'body-parts'),
    '\U0001f442\U0001f3fd': EmojiRecord('\U0001f442\U0001f3fd', 'ear: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f442\U0001f3fd', 'People & Body', 'body-parts'),
    '\U0001f442\U0001f3fe': EmojiRecord('\U0001f442\U0001f3fe', 'ear: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f442\U0001f3fe', 'People & Body', 'body-parts'),
    '\U0001f442\U0001f3ff': EmojiRecord('\U0001f442\U0001f3ff', 'ear: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f442\U0001f3ff', 'People & Body', 'body-parts'),
    '\U0001f9bb': EmojiRecord('\U0001f9bb', 'ear with hearing aid', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bb', 'People & Body', 'body-parts'),
    '\U0001f9bb\U0001f3fb': EmojiRecord('\U0001f9bb\U0001f3fb', 'ear with hearing aid: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bb\U0001f3fb', 'People & Body', 'body-parts'),
    '\U0001f9bb\U0001f3fc': EmojiRecord('\U0001f9bb\U0001f3fc', 'ear with hearing aid: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bb\U0001f3fc', 'People & Body', 'body-parts'),
    '\U0001f9bb\U0001f3fd': EmojiRecord('\U0001f9bb\U0001f3fd', 'ear with hearing aid: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bb\U0001f3fd', 'People & Body', 'body-parts'),
    '\U0001f9bb\U0001f3fe': EmojiRecord('\U0001f9bb\U0001f3fe', 'ear with hearing aid: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bb\U0001f3fe', 'People & Body', 'body-parts'),
    '\U0001f9bb\U0001f3ff': EmojiRecord('\U0001f9bb\U0001f3ff', 'ear with hearing aid: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bb\U0001f3ff', 'People & Body', 'body-parts'),
    '\U0001f443': EmojiRecord('\U0001f443', 'nose', Status.FULLY_QUALIFIED, '0.6', '\U0001f443', 'People & Body', 'body-parts'),
    '\U0001f443\U0001f3fb': EmojiRecord('\U0001f443\U0001f3fb', 'nose: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f443\U0001f3fb', 'People & Body', 'body-parts'),
    '\U0001f443\U0001f3fc': EmojiRecord('\U0001f443\U0001f3fc', 'nose: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f443\U0001f3fc', 'People & Body', 'body-parts'),
    '\U0001f443\U0001f3fd': EmojiRecord('\U0001f443\U0001f3fd', 'nose: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f443\U0001f3fd', 'People & Body', 'body-parts'),
    '\U0001f443\U0001f3fe': EmojiRecord('\U0001f443\U0001f3fe', 'nose: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f443\U0001f3fe', 'People & Body', 'body-parts'),
    '\U0001f443\U0001f3ff': EmojiRecord('\U0001f443\U0001f3ff', 'nose: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f443\U0001f3ff', 'People & Body', 'body-parts'),
    '\U0001f9e0': EmojiRecord('\U0001f9e0', 'brain', Status.FULLY_QUALIFIED, '5.0', '\U0001f9e0', 'People & Body', 'body-parts'),
    '\U0001fac0': EmojiRecord('\U0001fac0', 'anatomical heart', Status.FULLY_QUALIFIED, '13.0', '\U0001fac0', 'People & Body', 'body-parts'),
    '\U0001fac1': EmojiRecord('\U0001fac1', 'lungs', Status.FULLY_QUALIFIED, '13.0', '\U0001fac1', 'People & Body', 'body-parts'),
    '\U0001f9b7': EmojiRecord('\U0001f9b7', 'tooth', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b7', 'People & Body', 'body-parts'),
    '\U0001f9b4': EmojiRecord('\U0001f9b4', 'bone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b4', 'People & Body', 'body-parts'),
    '\U0001f440': EmojiRecord('\U0001f440', 'eyes', Status.FULLY_QUALIFIED, '0.6', '\U0001f440', 'People & Body', 'body-parts'),
    '\U0001f441\ufe0f': EmojiRecord('\U0001f441\ufe0f', 'eye', Status.FULLY_QUALIFIED, '0.7', '\U0001f441\ufe0f', 'People & Body', 'body-parts'),
    '\U0001f441': EmojiRecord('\U0001f441', 'eye', Status.UNQUALIFIED, '0.7', '\U0001f441\ufe0f', 'People & Body', 'body-parts'),
    '\U0001f445': EmojiRecord('\U0001f445', 'tongue', Status.FULLY_QUALIFIED, '0.6', '\U0001f445', 'People & Body', 'body-parts'),
    '\U0001f444': EmojiRecord('\U0001f444', 'mouth', Status.FULLY_QUALIFIED, '0.6', '\U0001f444', 'People & Body', 'body-parts'),
    '\U0001fae6': EmojiRecord('\U0001fae6', 'biting lip', Status.FULLY_QUALIFIED, '14.0', '\U0001fae6', 'People & Body', 'body-parts'),
    '\U0001f476': EmojiRecord('\U0001f476', 'baby', Status.FULLY_QUALIFIED, '0.6', '\U0001f476', 'People & Body', 'person'),
    '\U0001f476\U0001f3fb': EmojiRecord('\U0001f476\U0001f3fb', 'baby: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f476\U0001f3fb', 'People & Body', 'person'),
    '\U0001f476\U0001f3fc': EmojiRecord('\U0001f476\U0001f3fc', 'baby: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f476\U0001f3fc', 'People & Body', 'person'),
    '\U0001f476\U0001f3fd': EmojiRecord('\U0001f476\U0001f3fd', 'baby: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f476\U0001f3fd', 'People & Body', 'person'),
    '\U0001f476\U0001f3fe': EmojiRecord('\U0001f476\U0001f3fe', 'baby: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f476\U0001f3fe', 'People & Body', 'person'),
    '\U0001f476\U0001f3ff': EmojiRecord('\U0001f476\U0001f3ff', 'baby: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f476\U0001f3ff', 'People & Body', 'person'),
    '\U0001f9d2': EmojiRecord('\U0001f9d2', 'child', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d2', 'People & Body', 'person'),
    '\U0001f9d2\U0001f3fb': EmojiRecord('\U0001f9d2\U0001f3fb', 'child: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d2\U0001f3fb', 'People & Body', 'person'),
    '\U0001f9d2\U0001f3fc': EmojiRecord('\U0001f9d2\U0001f3fc', 'child: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d2\U0001f3fc', 'People & Body', 'person'),
    '\U0001f9d2\U0001f3fd': EmojiRecord('\U0001f9d2\U0001f3fd', 'child: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d2\U0001f3fd', 'People & Body', 'person'),
    '\U0001f9d2\U0001f3fe': EmojiRecord('\U0001f9d2\U0001f3fe', 'child: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d2\U0001f3fe', 'People & Body', 'person'),
    '\U0001f9d2\U0001f3ff': EmojiRecord('\U0001f9d2\U0001f3ff', 'child: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d2\U0001f3ff', 'People & Body', 'person'),
    '\U0001f466': EmojiRecord('\U0001f466', 'boy', Status.FULLY_QUALIFIED, '0.6', '\U0001f466', 'People & Body', 'person'),
    '\U0001f466\U0001f3fb': EmojiRecord('\U0001f466\U0001f3fb', 'boy: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f466\U0001f3fb', 'People & Body', 'person'),
    '\U0001f466\U0001f3fc': EmojiRecord('\U0001f466\U0001f3fc', 'boy: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f466\U0001f3fc', 'People & Body', 'person'),
    '\U0001f466\U0001f3fd': EmojiRecord('\U0001f466\U0001f3fd', 'boy: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f466\U0001f3fd', 'People & Body', 'person'),
    '\U0001f466\U0001f3fe': EmojiRecord('\U0001f466\U0001f3fe', 'boy: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f466\U0001f3fe', 'People & Body', 'person'),
    '\U0001f466\U0001f3ff': EmojiRecord('\U0001f466\U0001f3ff', 'boy: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f466\U0001f3ff', 'People & Body', 'person'),
    '\U0001f467': EmojiRecord('\U0001f467', 'girl', Status.FULLY_QUALIFIED, '0.6', '\U0001f467', 'People & Body', 'person'),
    '\U0001f467\U0001f3fb': EmojiRecord('\U0001f467\U0001f3fb', 'girl: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f467\U0001f3fb', 'People & Body', 'person'),
    '\U0001f467\U0001f3fc': EmojiRecord('\U0001f467\U0001f3fc', 'girl: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f467\U0001f3fc', 'People & Body', 'person'),
    '\U0001f467\U0001f3fd': EmojiRecord('\U0001f467\U0001f3fd', 'girl: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f467\U0001f3fd', 'People & Body', 'person'),
    '\U0001f467\U0001f3fe': EmojiRecord('\U0001f467\U0001f3fe', 'girl: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f467\U0001f3fe', 'People & Body', 'person'),
    '\U0001f467\U0001f3ff': EmojiRecord('\U0001f467\U0001f3ff', 'girl: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f467\U0001f3ff', 'People & Body', 'person'),
    '\U0001f9d1': EmojiRecord('\U0001f9d1', 'person', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d1', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fb', 'person: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d1\U0001f3fb', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fc', 'person: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d1\U0001f3fc', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fd', 'person: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d1\U0001f3fd', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fe', 'person: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d1\U0001f3fe', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3ff', 'person: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d1\U0001f3ff', 'People & Body', 'person'),
    '\U0001f471': EmojiRecord('\U0001f471', 'person: blond hair', Status.FULLY_QUALIFIED, '0.6', '\U0001f471', 'People & Body', 'person'),
    '\U0001f471\U0001f3fb': EmojiRecord('\U0001f471\U0001f3fb', 'person: light skin tone, blond hair', Status.FULLY_QUALIFIED, '1.0', '\U0001f471\U0001f3fb', 'People & Body', 'person'),
    '\U0001f471\U0001f3fc': EmojiRecord('\U0001f471\U0001f3fc', 'person: medium-light skin tone, blond hair', Status.FULLY_QUALIFIED, '1.0', '\U0001f471\U0001f3fc', 'People & Body', 'person'),
    '\U0001f471\U0001f3fd': EmojiRecord('\U0001f471\U0001f3fd', 'person: medium skin tone, blond hair', Status.FULLY_QUALIFIED, '1.0', '\U0001f471\U0001f3fd', 'People & Body', 'person'),
    '\U0001f471\U0001f3fe': EmojiRecord('\U0001f471\U0001f3fe', 'person: medium-dark skin tone, blond hair', Status.FULLY_QUALIFIED, '1.0', '\U0001f471\U0001f3fe', 'People & Body', 'person'),
    '\U0001f471\U0001f3ff': EmojiRecord('\U0001f471\U0001f3ff', 'person: dark skin tone, blond hair', Status.FULLY_QUALIFIED, '1.0', '\U0001f471\U0001f3ff', 'People & Body', 'person'),
    '\U0001f468': EmojiRecord('\U0001f468', 'man', Status.FULLY_QUALIFIED, '0.6', '\U0001f468', 'People & Body', 'person'),
    '\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fb', 'man: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f468\U0001f3fb', 'People & Body', 'person'),
    '\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fc', 'man: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f468\U0001f3fc', 'People & Body', 'person'),
    '\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fd', 'man: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f468\U0001f3fd', 'People & Body', 'person'),
    '\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fe', 'man: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f468\U0001f3fe', 'People & Body', 'person'),
    '\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3ff', 'man: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f468\U0001f3ff', 'People & Body', 'person'),
    '\U0001f9d4': EmojiRecord('\U0001f9d4', 'person: beard', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d4', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fb': EmojiRecord('\U0001f9d4\U0001f3fb', 'person: light skin tone, beard', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d4\U0001f3fb', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fc': EmojiRecord('\U0001f9d4\U0001f3fc', 'person: medium-light skin tone, beard', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d4\U0001f3fc', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fd': EmojiRecord('\U0001f9d4\U0001f3fd', 'person: medium skin tone, beard', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d4\U0001f3fd', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fe': EmojiRecord('\U0001f9d4\U0001f3fe', 'person: medium-dark skin tone, beard', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d4\U0001f3fe', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3ff': EmojiRecord('\U0001f9d4\U0001f3ff', 'person: dark skin tone, beard', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d4\U0001f3ff', 'People & Body', 'person'),
    '\U0001f9d4\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d4\u200d\u2642\ufe0f', 'man: beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\u200d\u2642': EmojiRecord('\U0001f9d4\u200d\u2642', 'man: beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fb\u200d\u2642\ufe0f', 'man: light skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9d4\U0001f3fb\u200d\u2642', 'man: light skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fc\u200d\u2642\ufe0f', 'man: medium-light skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9d4\U0001f3fc\u200d\u2642', 'man: medium-light skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fd\u200d\u2642\ufe0f', 'man: medium skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9d4\U0001f3fd\u200d\u2642', 'man: medium skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fe\u200d\u2642\ufe0f', 'man: medium-dark skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9d4\U0001f3fe\u200d\u2642', 'man: medium-dark skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d4\U0001f3ff\u200d\u2642\ufe0f', 'man: dark skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9d4\U0001f3ff\u200d\u2642', 'man: dark skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d4\u200d\u2640\ufe0f', 'woman: beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\u200d\u2640': EmojiRecord('\U0001f9d4\u200d\u2640', 'woman: beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fb\u200d\u2640\ufe0f', 'woman: light skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9d4\U0001f3fb\u200d\u2640', 'woman: light skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fc\u200d\u2640\ufe0f', 'woman: medium-light skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9d4\U0001f3fc\u200d\u2640', 'woman: medium-light skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fd\u200d\u2640\ufe0f', 'woman: medium skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9d4\U0001f3fd\u200d\u2640', 'woman: medium skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d4\U0001f3fe\u200d\u2640\ufe0f', 'woman: medium-dark skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9d4\U0001f3fe\u200d\u2640', 'woman: medium-dark skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d4\U0001f3ff\u200d\u2640\ufe0f', 'woman: dark skin tone, beard', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f9d4\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9d4\U0001f3ff\u200d\u2640', 'woman: dark skin tone, beard', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d4\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f468\u200d\U0001f9b0': EmojiRecord('\U0001f468\u200d\U0001f9b0', 'man: red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f468\U0001f3fb\u200d\U0001f9b0': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9b0', 'man: light skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fb\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f468\U0001f3fc\u200d\U0001f9b0': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9b0', 'man: medium-light skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fc\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f468\U0001f3fd\u200d\U0001f9b0': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9b0', 'man: medium skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fd\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f468\U0001f3fe\u200d\U0001f9b0': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9b0', 'man: medium-dark skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fe\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f468\U0001f3ff\u200d\U0001f9b0': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9b0', 'man: dark skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3ff\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f468\u200d\U0001f9b1': EmojiRecord('\U0001f468\u200d\U0001f9b1', 'man: curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f468\U0001f3fb\u200d\U0001f9b1': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9b1', 'man: light skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fb\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f468\U0001f3fc\u200d\U0001f9b1': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9b1', 'man: medium-light skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fc\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f468\U0001f3fd\u200d\U0001f9b1': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9b1', 'man: medium skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fd\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f468\U0001f3fe\u200d\U0001f9b1': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9b1', 'man: medium-dark skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fe\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f468\U0001f3ff\u200d\U0001f9b1': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9b1', 'man: dark skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3ff\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f468\u200d\U0001f9b3': EmojiRecord('\U0001f468\u200d\U0001f9b3', 'man: white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f468\U0001f3fb\u200d\U0001f9b3': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9b3', 'man: light skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fb\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f468\U0001f3fc\u200d\U0001f9b3': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9b3', 'man: medium-light skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fc\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f468\U0001f3fd\u200d\U0001f9b3': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9b3', 'man: medium skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fd\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f468\U0001f3fe\u200d\U0001f9b3': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9b3', 'man: medium-dark skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fe\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f468\U0001f3ff\u200d\U0001f9b3': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9b3', 'man: dark skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3ff\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f468\u200d\U0001f9b2': EmojiRecord('\U0001f468\u200d\U0001f9b2', 'man: bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f468\U0001f3fb\u200d\U0001f9b2': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9b2', 'man: light skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fb\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f468\U0001f3fc\u200d\U0001f9b2': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9b2', 'man: medium-light skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fc\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f468\U0001f3fd\u200d\U0001f9b2': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9b2', 'man: medium skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fd\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f468\U0001f3fe\u200d\U0001f9b2': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9b2', 'man: medium-dark skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3fe\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f468\U0001f3ff\u200d\U0001f9b2': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9b2', 'man: dark skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f468\U0001f3ff\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f469': EmojiRecord('\U0001f469', 'woman', Status.FULLY_QUALIFIED, '0.6', '\U0001f469', 'People & Body', 'person'),
    '\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb', 'woman: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f469\U0001f3fb', 'People & Body', 'person'),
    '\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc', 'woman: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f469\U0001f3fc', 'People & Body', 'person'),
    '\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd', 'woman: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f469\U0001f3fd', 'People & Body', 'person'),
    '\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe', 'woman: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f469\U0001f3fe', 'People & Body', 'person'),
    '\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff', 'woman: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f469\U0001f3ff', 'People & Body', 'person'),
    '\U0001f469\u200d\U0001f9b0': EmojiRecord('\U0001f469\u200d\U0001f9b0', 'woman: red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f469\U0001f3fb\u200d\U0001f9b0': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9b0', 'woman: light skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fb\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f469\U0001f3fc\u200d\U0001f9b0': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9b0', 'woman: medium-light skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fc\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f469\U0001f3fd\u200d\U0001f9b0': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9b0', 'woman: medium skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fd\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f469\U0001f3fe\u200d\U0001f9b0': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9b0', 'woman: medium-dark skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fe\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f469\U0001f3ff\u200d\U0001f9b0': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9b0', 'woman: dark skin tone, red hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3ff\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f9d1\u200d\U0001f9b0': EmojiRecord('\U0001f9d1\u200d\U0001f9b0', 'person: red hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9b0': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9b0', 'person: light skin tone, red hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9b0': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9b0', 'person: medium-light skin tone, red hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9b0': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9b0', 'person: medium skin tone, red hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9b0': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9b0', 'person: medium-dark skin tone, red hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9b0': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9b0', 'person: dark skin tone, red hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9b0', 'People & Body', 'person'),
    '\U0001f469\u200d\U0001f9b1': EmojiRecord('\U0001f469\u200d\U0001f9b1', 'woman: curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f469\U0001f3fb\u200d\U0001f9b1': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9b1', 'woman: light skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fb\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f469\U0001f3fc\u200d\U0001f9b1': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9b1', 'woman: medium-light skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fc\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f469\U0001f3fd\u200d\U0001f9b1': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9b1', 'woman: medium skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fd\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f469\U0001f3fe\u200d\U0001f9b1': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9b1', 'woman: medium-dark skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fe\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f469\U0001f3ff\u200d\U0001f9b1': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9b1', 'woman: dark skin tone, curly hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3ff\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f9d1\u200d\U0001f9b1': EmojiRecord('\U0001f9d1\u200d\U0001f9b1', 'person: curly hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9b1': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9b1', 'person: light skin tone, curly hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9b1': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9b1', 'person: medium-light skin tone, curly hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9b1': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9b1', 'person: medium skin tone, curly hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9b1': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9b1', 'person: medium-dark skin tone, curly hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9b1': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9b1', 'person: dark skin tone, curly hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9b1', 'People & Body', 'person'),
    '\U0001f469\u200d\U0001f9b3': EmojiRecord('\U0001f469\u200d\U0001f9b3', 'woman: white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f469\U0001f3fb\u200d\U0001f9b3': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9b3', 'woman: light skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fb\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f469\U0001f3fc\u200d\U0001f9b3': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9b3', 'woman: medium-light skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fc\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f469\U0001f3fd\u200d\U0001f9b3': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9b3', 'woman: medium skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fd\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f469\U0001f3fe\u200d\U0001f9b3': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9b3', 'woman: medium-dark skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fe\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f469\U0001f3ff\u200d\U0001f9b3': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9b3', 'woman: dark skin tone, white hair', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3ff\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f9d1\u200d\U0001f9b3': EmojiRecord('\U0001f9d1\u200d\U0001f9b3', 'person: white hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9b3': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9b3', 'person: light skin tone, white hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9b3': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9b3', 'person: medium-light skin tone, white hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9b3': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9b3', 'person: medium skin tone, white hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9b3': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9b3', 'person: medium-dark skin tone, white hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9b3': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9b3', 'person: dark skin tone, white hair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9b3', 'People & Body', 'person'),
    '\U0001f469\u200d\U0001f9b2': EmojiRecord('\U0001f469\u200d\U0001f9b2', 'woman: bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f469\U0001f3fb\u200d\U0001f9b2': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9b2', 'woman: light skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fb\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f469\U0001f3fc\u200d\U0001f9b2': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9b2', 'woman: medium-light skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fc\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f469\U0001f3fd\u200d\U0001f9b2': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9b2', 'woman: medium skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fd\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f469\U0001f3fe\u200d\U0001f9b2': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9b2', 'woman: medium-dark skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3fe\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f469\U0001f3ff\u200d\U0001f9b2': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9b2', 'woman: dark skin tone, bald', Status.FULLY_QUALIFIED, '11.0', '\U0001f469\U0001f3ff\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f9d1\u200d\U0001f9b2': EmojiRecord('\U0001f9d1\u200d\U0001f9b2', 'person: bald', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9b2': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9b2', 'person: light skin tone, bald', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9b2': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9b2', 'person: medium-light skin tone, bald', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9b2': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9b2', 'person: medium skin tone, bald', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9b2': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9b2', 'person: medium-dark skin tone, bald', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9b2': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9b2', 'person: dark skin tone, bald', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9b2', 'People & Body', 'person'),
    '\U0001f471\u200d\u2640\ufe0f': EmojiRecord('\U0001f471\u200d\u2640\ufe0f', 'woman: blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\u200d\u2640': EmojiRecord('\U0001f471\u200d\u2640', 'woman: blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f471\U0001f3fb\u200d\u2640\ufe0f', 'woman: light skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f471\U0001f3fb\u200d\u2640', 'woman: light skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f471\U0001f3fc\u200d\u2640\ufe0f', 'woman: medium-light skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f471\U0001f3fc\u200d\u2640', 'woman: medium-light skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f471\U0001f3fd\u200d\u2640\ufe0f', 'woman: medium skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f471\U0001f3fd\u200d\u2640', 'woman: medium skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f471\U0001f3fe\u200d\u2640\ufe0f', 'woman: medium-dark skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f471\U0001f3fe\u200d\u2640', 'woman: medium-dark skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f471\U0001f3ff\u200d\u2640\ufe0f', 'woman: dark skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f471\U0001f3ff\u200d\u2640', 'woman: dark skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person'),
    '\U0001f471\u200d\u2642\ufe0f': EmojiRecord('\U0001f471\u200d\u2642\ufe0f', 'man: blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\u200d\u2642': EmojiRecord('\U0001f471\u200d\u2642', 'man: blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f471\U0001f3fb\u200d\u2642\ufe0f', 'man: light skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f471\U0001f3fb\u200d\u2642', 'man: light skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f471\U0001f3fc\u200d\u2642\ufe0f', 'man: medium-light skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f471\U0001f3fc\u200d\u2642', 'man: medium-light skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f471\U0001f3fd\u200d\u2642\ufe0f', 'man: medium skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f471\U0001f3fd\u200d\u2642', 'man: medium skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f471\U0001f3fe\u200d\u2642\ufe0f', 'man: medium-dark skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f471\U0001f3fe\u200d\u2642', 'man: medium-dark skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f471\U0001f3ff\u200d\u2642\ufe0f', 'man: dark skin tone, blond hair', Status.FULLY_QUALIFIED, '4.0', '\U0001f471\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f471\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f471\U0001f3ff\u200d\u2642', 'man: dark skin tone, blond hair', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f471\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person'),
    '\U0001f9d3': EmojiRecord('\U0001f9d3', 'older person', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d3', 'People & Body', 'person'),
    '\U0001f9d3\U0001f3fb': EmojiRecord('\U0001f9d3\U0001f3fb', 'older person: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d3\U0001f3fb', 'People & Body', 'person'),
    '\U0001f9d3\U0001f3fc': EmojiRecord('\U0001f9d3\U0001f3fc', 'older person: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d3\U0001f3fc', 'People & Body', 'person'),
    '\U0001f9d3\U0001f3fd': EmojiRecord('\U0001f9d3\U0001f3fd', 'older person: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d3\U0001f3fd', 'People & Body', 'person'),
    '\U0001f9d3\U0001f3fe': EmojiRecord('\U0001f9d3\U0001f3fe', 'older person: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d3\U0001f3fe', 'People & Body', 'person'),
    '\U0001f9d3\U0001f3ff': EmojiRecord('\U0001f9d3\U0001f3ff', 'older person: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d3\U0001f3ff', 'People & Body', 'person'),
    '\U0001f474': EmojiRecord('\U0001f474', 'old man', Status.FULLY_QUALIFIED, '0.6', '\U0001f474', 'People & Body', 'person'),
    '\U0001f474\U0001f3fb': EmojiRecord('\U0001f474\U0001f3fb', 'old man: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f474\U0001f3fb', 'People & Body', 'person'),
    '\U0001f474\U0001f3fc': EmojiRecord('\U0001f474\U0001f3fc', 'old man: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f474\U0001f3fc', 'People & Body', 'person'),
    '\U0001f474\U0001f3fd': EmojiRecord('\U0001f474\U0001f3fd', 'old man: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f474\U0001f3fd', 'People & Body', 'person'),
    '\U0001f474\U0001f3fe': EmojiRecord('\U0001f474\U0001f3fe', 'old man: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f474\U0001f3fe', 'People & Body', 'person'),
    '\U0001f474\U0001f3ff': EmojiRecord('\U0001f474\U0001f3ff', 'old man: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f474\U0001f3ff', 'People & Body', 'person'),
    '\U0001f475': EmojiRecord('\U0001f475', 'old woman', Status.FULLY_QUALIFIED, '0.6', '\U0001f475', 'People & Body', 'person'),
    '\U0001f475\U0001f3fb': EmojiRecord('\U0001f475\U0001f3fb', 'old woman: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f475\U0001f3fb', 'People & Body', 'person'),
    '\U0001f475\U0001f3fc': EmojiRecord('\U0001f475\U0001f3fc', 'old woman: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f475\U0001f3fc', 'People & Body', 'person'),
    '\U0001f475\U0001f3fd': EmojiRecord('\U0001f475\U0001f3fd', 'old woman: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f475\U0001f3fd', 'People & Body', 'person'),
    '\U0001f475\U0001f3fe': EmojiRecord('\U0001f475\U0001f3fe', 'old woman: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f475\U0001f3fe', 'People & Body', 'person'),
    '\U0001f475\U0001f3ff': EmojiRecord('\U0001f475\U0001f3ff', 'old woman: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f475\U0001f3ff', 'People & Body', 'person'),
    '\U0001f64d': EmojiRecord('\U0001f64d', 'person frowning', Status.FULLY_QUALIFIED, '0.6', '\U0001f64d', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fb': EmojiRecord('\U0001f64d\U0001f3fb', 'person frowning: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64d\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fc': EmojiRecord('\U0001f64d\U0001f3fc', 'person frowning: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64d\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fd': EmojiRecord('\U0001f64d\U0001f3fd', 'person frowning: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64d\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fe': EmojiRecord('\U0001f64d\U0001f3fe', 'person frowning: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64d\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3ff': EmojiRecord('\U0001f64d\U0001f3ff', 'person frowning: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64d\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f64d\u200d\u2642\ufe0f': EmojiRecord('\U0001f64d\u200d\u2642\ufe0f', 'man frowning', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\u200d\u2642': EmojiRecord('\U0001f64d\u200d\u2642', 'man frowning', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f64d\U0001f3fb\u200d\u2642\ufe0f', 'man frowning: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f64d\U0001f3fb\u200d\u2642', 'man frowning: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f64d\U0001f3fc\u200d\u2642\ufe0f', 'man frowning: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f64d\U0001f3fc\u200d\u2642', 'man frowning: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f64d\U0001f3fd\u200d\u2642\ufe0f', 'man frowning: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f64d\U0001f3fd\u200d\u2642', 'man frowning: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f64d\U0001f3fe\u200d\u2642\ufe0f', 'man frowning: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f64d\U0001f3fe\u200d\u2642', 'man frowning: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f64d\U0001f3ff\u200d\u2642\ufe0f', 'man frowning: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f64d\U0001f3ff\u200d\u2642', 'man frowning: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\u200d\u2640\ufe0f': EmojiRecord('\U0001f64d\u200d\u2640\ufe0f', 'woman frowning', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\u200d\u2640': EmojiRecord('\U0001f64d\u200d\u2640', 'woman frowning', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f64d\U0001f3fb\u200d\u2640\ufe0f', 'woman frowning: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f64d\U0001f3fb\u200d\u2640', 'woman frowning: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f64d\U0001f3fc\u200d\u2640\ufe0f', 'woman frowning: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f64d\U0001f3fc\u200d\u2640', 'woman frowning: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f64d\U0001f3fd\u200d\u2640\ufe0f', 'woman frowning: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f64d\U0001f3fd\u200d\u2640', 'woman frowning: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f64d\U0001f3fe\u200d\u2640\ufe0f', 'woman frowning: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f64d\U0001f3fe\u200d\u2640', 'woman frowning: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f64d\U0001f3ff\u200d\u2640\ufe0f', 'woman frowning: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64d\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f64d\U0001f3ff\u200d\u2640', 'woman frowning: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64d\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e': EmojiRecord('\U0001f64e', 'person pouting', Status.FULLY_QUALIFIED, '0.6', '\U0001f64e', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fb': EmojiRecord('\U0001f64e\U0001f3fb', 'person pouting: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64e\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fc': EmojiRecord('\U0001f64e\U0001f3fc', 'person pouting: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64e\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fd': EmojiRecord('\U0001f64e\U0001f3fd', 'person pouting: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64e\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fe': EmojiRecord('\U0001f64e\U0001f3fe', 'person pouting: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64e\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3ff': EmojiRecord('\U0001f64e\U0001f3ff', 'person pouting: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64e\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f64e\u200d\u2642\ufe0f': EmojiRecord('\U0001f64e\u200d\u2642\ufe0f', 'man pouting', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\u200d\u2642': EmojiRecord('\U0001f64e\u200d\u2642', 'man pouting', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f64e\U0001f3fb\u200d\u2642\ufe0f', 'man pouting: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f64e\U0001f3fb\u200d\u2642', 'man pouting: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f64e\U0001f3fc\u200d\u2642\ufe0f', 'man pouting: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f64e\U0001f3fc\u200d\u2642', 'man pouting: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f64e\U0001f3fd\u200d\u2642\ufe0f', 'man pouting: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f64e\U0001f3fd\u200d\u2642', 'man pouting: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f64e\U0001f3fe\u200d\u2642\ufe0f', 'man pouting: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f64e\U0001f3fe\u200d\u2642', 'man pouting: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f64e\U0001f3ff\u200d\u2642\ufe0f', 'man pouting: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f64e\U0001f3ff\u200d\u2642', 'man pouting: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\u200d\u2640\ufe0f': EmojiRecord('\U0001f64e\u200d\u2640\ufe0f', 'woman pouting', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\u200d\u2640': EmojiRecord('\U0001f64e\u200d\u2640', 'woman pouting', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f64e\U0001f3fb\u200d\u2640\ufe0f', 'woman pouting: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f64e\U0001f3fb\u200d\u2640', 'woman pouting: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f64e\U0001f3fc\u200d\u2640\ufe0f', 'woman pouting: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f64e\U0001f3fc\u200d\u2640', 'woman pouting: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f64e\U0001f3fd\u200d\u2640\ufe0f', 'woman pouting: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f64e\U0001f3fd\u200d\u2640', 'woman pouting: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f64e\U0001f3fe\u200d\u2640\ufe0f', 'woman pouting: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f64e\U0001f3fe\u200d\u2640', 'woman pouting: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f64e\U0001f3ff\u200d\u2640\ufe0f', 'woman pouting: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64e\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f64e\U0001f3ff\u200d\u2640', 'woman pouting: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64e\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645': EmojiRecord('\U0001f645', 'person gesturing NO', Status.FULLY_QUALIFIED, '0.6', '\U0001f645', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fb': EmojiRecord('\U0001f645\U0001f3fb', 'person gesturing NO: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f645\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fc': EmojiRecord('\U0001f645\U0001f3fc', 'person gesturing NO: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f645\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fd': EmojiRecord('\U0001f645\U0001f3fd', 'person gesturing NO: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f645\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fe': EmojiRecord('\U0001f645\U0001f3fe', 'person gesturing NO: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f645\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3ff': EmojiRecord('\U0001f645\U0001f3ff', 'person gesturing NO: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f645\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f645\u200d\u2642\ufe0f': EmojiRecord('\U0001f645\u200d\u2642\ufe0f', 'man gesturing NO', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\u200d\u2642': EmojiRecord('\U0001f645\u200d\u2642', 'man gesturing NO', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f645\U0001f3fb\u200d\u2642\ufe0f', 'man gesturing NO: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f645\U0001f3fb\u200d\u2642', 'man gesturing NO: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f645\U0001f3fc\u200d\u2642\ufe0f', 'man gesturing NO: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f645\U0001f3fc\u200d\u2642', 'man gesturing NO: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f645\U0001f3fd\u200d\u2642\ufe0f', 'man gesturing NO: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f645\U0001f3fd\u200d\u2642', 'man gesturing NO: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f645\U0001f3fe\u200d\u2642\ufe0f', 'man gesturing NO: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f645\U0001f3fe\u200d\u2642', 'man gesturing NO: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f645\U0001f3ff\u200d\u2642\ufe0f', 'man gesturing NO: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f645\U0001f3ff\u200d\u2642', 'man gesturing NO: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\u200d\u2640\ufe0f': EmojiRecord('\U0001f645\u200d\u2640\ufe0f', 'woman gesturing NO', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\u200d\u2640': EmojiRecord('\U0001f645\u200d\u2640', 'woman gesturing NO', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f645\U0001f3fb\u200d\u2640\ufe0f', 'woman gesturing NO: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f645\U0001f3fb\u200d\u2640', 'woman gesturing NO: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f645\U0001f3fc\u200d\u2640\ufe0f', 'woman gesturing NO: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f645\U0001f3fc\u200d\u2640', 'woman gesturing NO: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f645\U0001f3fd\u200d\u2640\ufe0f', 'woman gesturing NO: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f645\U0001f3fd\u200d\u2640', 'woman gesturing NO: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f645\U0001f3fe\u200d\u2640\ufe0f', 'woman gesturing NO: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f645\U0001f3fe\u200d\u2640', 'woman gesturing NO: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f645\U0001f3ff\u200d\u2640\ufe0f', 'woman gesturing NO: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f645\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f645\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f645\U0001f3ff\u200d\u2640', 'woman gesturing NO: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f645\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646': EmojiRecord('\U0001f646', 'person gesturing OK', Status.FULLY_QUALIFIED, '0.6', '\U0001f646', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fb': EmojiRecord('\U0001f646\U0001f3fb', 'person gesturing OK: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f646\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fc': EmojiRecord('\U0001f646\U0001f3fc', 'person gesturing OK: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f646\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fd': EmojiRecord('\U0001f646\U0001f3fd', 'person gesturing OK: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f646\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fe': EmojiRecord('\U0001f646\U0001f3fe', 'person gesturing OK: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f646\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3ff': EmojiRecord('\U0001f646\U0001f3ff', 'person gesturing OK: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f646\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f646\u200d\u2642\ufe0f': EmojiRecord('\U0001f646\u200d\u2642\ufe0f', 'man gesturing OK', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\u200d\u2642': EmojiRecord('\U0001f646\u200d\u2642', 'man gesturing OK', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f646\U0001f3fb\u200d\u2642\ufe0f', 'man gesturing OK: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f646\U0001f3fb\u200d\u2642', 'man gesturing OK: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f646\U0001f3fc\u200d\u2642\ufe0f', 'man gesturing OK: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f646\U0001f3fc\u200d\u2642', 'man gesturing OK: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f646\U0001f3fd\u200d\u2642\ufe0f', 'man gesturing OK: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f646\U0001f3fd\u200d\u2642', 'man gesturing OK: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f646\U0001f3fe\u200d\u2642\ufe0f', 'man gesturing OK: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f646\U0001f3fe\u200d\u2642', 'man gesturing OK: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f646\U0001f3ff\u200d\u2642\ufe0f', 'man gesturing OK: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f646\U0001f3ff\u200d\u2642', 'man gesturing OK: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\u200d\u2640\ufe0f': EmojiRecord('\U0001f646\u200d\u2640\ufe0f', 'woman gesturing OK', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\u200d\u2640': EmojiRecord('\U0001f646\u200d\u2640', 'woman gesturing OK', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f646\U0001f3fb\u200d\u2640\ufe0f', 'woman gesturing OK: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f646\U0001f3fb\u200d\u2640', 'woman gesturing OK: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f646\U0001f3fc\u200d\u2640\ufe0f', 'woman gesturing OK: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f646\U0001f3fc\u200d\u2640', 'woman gesturing OK: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f646\U0001f3fd\u200d\u2640\ufe0f', 'woman gesturing OK: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f646\U0001f3fd\u200d\u2640', 'woman gesturing OK: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f646\U0001f3fe\u200d\u2640\ufe0f', 'woman gesturing OK: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f646\U0001f3fe\u200d\u2640', 'woman gesturing OK: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f646\U0001f3ff\u200d\u2640\ufe0f', 'woman gesturing OK: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f646\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f646\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f646\U0001f3ff\u200d\u2640', 'woman gesturing OK: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f646\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481': EmojiRecord('\U0001f481', 'person tipping hand', Status.FULLY_QUALIFIED, '0.6', '\U0001f481', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fb': EmojiRecord('\U0001f481\U0001f3fb', 'person tipping hand: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f481\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fc': EmojiRecord('\U0001f481\U0001f3fc', 'person tipping hand: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f481\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fd': EmojiRecord('\U0001f481\U0001f3fd', 'person tipping hand: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f481\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fe': EmojiRecord('\U0001f481\U0001f3fe', 'person tipping hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f481\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3ff': EmojiRecord('\U0001f481\U0001f3ff', 'person tipping hand: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f481\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f481\u200d\u2642\ufe0f': EmojiRecord('\U0001f481\u200d\u2642\ufe0f', 'man tipping hand', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\u200d\u2642': EmojiRecord('\U0001f481\u200d\u2642', 'man tipping hand', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f481\U0001f3fb\u200d\u2642\ufe0f', 'man tipping hand: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f481\U0001f3fb\u200d\u2642', 'man tipping hand: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f481\U0001f3fc\u200d\u2642\ufe0f', 'man tipping hand: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f481\U0001f3fc\u200d\u2642', 'man tipping hand: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f481\U0001f3fd\u200d\u2642\ufe0f', 'man tipping hand: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f481\U0001f3fd\u200d\u2642', 'man tipping hand: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f481\U0001f3fe\u200d\u2642\ufe0f', 'man tipping hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f481\U0001f3fe\u200d\u2642', 'man tipping hand: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f481\U0001f3ff\u200d\u2642\ufe0f', 'man tipping hand: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f481\U0001f3ff\u200d\u2642', 'man tipping hand: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\u200d\u2640\ufe0f': EmojiRecord('\U0001f481\u200d\u2640\ufe0f', 'woman tipping hand', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\u200d\u2640': EmojiRecord('\U0001f481\u200d\u2640', 'woman tipping hand', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f481\U0001f3fb\u200d\u2640\ufe0f', 'woman tipping hand: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f481\U0001f3fb\u200d\u2640', 'woman tipping hand: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f481\U0001f3fc\u200d\u2640\ufe0f', 'woman tipping hand: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f481\U0001f3fc\u200d\u2640', 'woman tipping hand: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f481\U0001f3fd\u200d\u2640\ufe0f', 'woman tipping hand: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f481\U0001f3fd\u200d\u2640', 'woman tipping hand: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f481\U0001f3fe\u200d\u2640\ufe0f', 'woman tipping hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f481\U0001f3fe\u200d\u2640', 'woman tipping hand: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f481\U0001f3ff\u200d\u2640\ufe0f', 'woman tipping hand: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f481\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f481\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f481\U0001f3ff\u200d\u2640', 'woman tipping hand: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f481\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b': EmojiRecord('\U0001f64b', 'person raising hand', Status.FULLY_QUALIFIED, '0.6', '\U0001f64b', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fb': EmojiRecord('\U0001f64b\U0001f3fb', 'person raising hand: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64b\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fc': EmojiRecord('\U0001f64b\U0001f3fc', 'person raising hand: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64b\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fd': EmojiRecord('\U0001f64b\U0001f3fd', 'person raising hand: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64b\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fe': EmojiRecord('\U0001f64b\U0001f3fe', 'person raising hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64b\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3ff': EmojiRecord('\U0001f64b\U0001f3ff', 'person raising hand: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f64b\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f64b\u200d\u2642\ufe0f': EmojiRecord('\U0001f64b\u200d\u2642\ufe0f', 'man raising hand', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\u200d\u2642': EmojiRecord('\U0001f64b\u200d\u2642', 'man raising hand', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f64b\U0001f3fb\u200d\u2642\ufe0f', 'man raising hand: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f64b\U0001f3fb\u200d\u2642', 'man raising hand: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f64b\U0001f3fc\u200d\u2642\ufe0f', 'man raising hand: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f64b\U0001f3fc\u200d\u2642', 'man raising hand: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f64b\U0001f3fd\u200d\u2642\ufe0f', 'man raising hand: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f64b\U0001f3fd\u200d\u2642', 'man raising hand: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f64b\U0001f3fe\u200d\u2642\ufe0f', 'man raising hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f64b\U0001f3fe\u200d\u2642', 'man raising hand: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f64b\U0001f3ff\u200d\u2642\ufe0f', 'man raising hand: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f64b\U0001f3ff\u200d\u2642', 'man raising hand: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\u200d\u2640\ufe0f': EmojiRecord('\U0001f64b\u200d\u2640\ufe0f', 'woman raising hand', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\u200d\u2640': EmojiRecord('\U0001f64b\u200d\u2640', 'woman raising hand', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f64b\U0001f3fb\u200d\u2640\ufe0f', 'woman raising hand: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f64b\U0001f3fb\u200d\u2640', 'woman raising hand: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f64b\U0001f3fc\u200d\u2640\ufe0f', 'woman raising hand: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f64b\U0001f3fc\u200d\u2640', 'woman raising hand: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f64b\U0001f3fd\u200d\u2640\ufe0f', 'woman raising hand: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f64b\U0001f3fd\u200d\u2640', 'woman raising hand: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f64b\U0001f3fe\u200d\u2640\ufe0f', 'woman raising hand: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f64b\U0001f3fe\u200d\u2640', 'woman raising hand: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f64b\U0001f3ff\u200d\u2640\ufe0f', 'woman raising hand: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f64b\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f64b\U0001f3ff\u200d\u2640', 'woman raising hand: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f64b\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf': EmojiRecord('\U0001f9cf', 'deaf person', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fb': EmojiRecord('\U0001f9cf\U0001f3fb', 'deaf person: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fc': EmojiRecord('\U0001f9cf\U0001f3fc', 'deaf person: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fd': EmojiRecord('\U0001f9cf\U0001f3fd', 'deaf person: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fe': EmojiRecord('\U0001f9cf\U0001f3fe', 'deaf person: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3ff': EmojiRecord('\U0001f9cf\U0001f3ff', 'deaf person: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f9cf\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cf\u200d\u2642\ufe0f', 'deaf man', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\u200d\u2642': EmojiRecord('\U0001f9cf\u200d\u2642', 'deaf man', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fb\u200d\u2642\ufe0f', 'deaf man: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9cf\U0001f3fb\u200d\u2642', 'deaf man: light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fc\u200d\u2642\ufe0f', 'deaf man: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9cf\U0001f3fc\u200d\u2642', 'deaf man: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fd\u200d\u2642\ufe0f', 'deaf man: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9cf\U0001f3fd\u200d\u2642', 'deaf man: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fe\u200d\u2642\ufe0f', 'deaf man: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9cf\U0001f3fe\u200d\u2642', 'deaf man: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cf\U0001f3ff\u200d\u2642\ufe0f', 'deaf man: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9cf\U0001f3ff\u200d\u2642', 'deaf man: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cf\u200d\u2640\ufe0f', 'deaf woman', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\u200d\u2640': EmojiRecord('\U0001f9cf\u200d\u2640', 'deaf woman', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fb\u200d\u2640\ufe0f', 'deaf woman: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9cf\U0001f3fb\u200d\u2640', 'deaf woman: light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fc\u200d\u2640\ufe0f', 'deaf woman: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9cf\U0001f3fc\u200d\u2640', 'deaf woman: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fd\u200d\u2640\ufe0f', 'deaf woman: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9cf\U0001f3fd\u200d\u2640', 'deaf woman: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cf\U0001f3fe\u200d\u2640\ufe0f', 'deaf woman: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9cf\U0001f3fe\u200d\u2640', 'deaf woman: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cf\U0001f3ff\u200d\u2640\ufe0f', 'deaf woman: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9cf\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9cf\U0001f3ff\u200d\u2640', 'deaf woman: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cf\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647': EmojiRecord('\U0001f647', 'person bowing', Status.FULLY_QUALIFIED, '0.6', '\U0001f647', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fb': EmojiRecord('\U0001f647\U0001f3fb', 'person bowing: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f647\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fc': EmojiRecord('\U0001f647\U0001f3fc', 'person bowing: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f647\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fd': EmojiRecord('\U0001f647\U0001f3fd', 'person bowing: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f647\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fe': EmojiRecord('\U0001f647\U0001f3fe', 'person bowing: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f647\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3ff': EmojiRecord('\U0001f647\U0001f3ff', 'person bowing: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f647\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f647\u200d\u2642\ufe0f': EmojiRecord('\U0001f647\u200d\u2642\ufe0f', 'man bowing', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\u200d\u2642': EmojiRecord('\U0001f647\u200d\u2642', 'man bowing', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f647\U0001f3fb\u200d\u2642\ufe0f', 'man bowing: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f647\U0001f3fb\u200d\u2642', 'man bowing: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f647\U0001f3fc\u200d\u2642\ufe0f', 'man bowing: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f647\U0001f3fc\u200d\u2642', 'man bowing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f647\U0001f3fd\u200d\u2642\ufe0f', 'man bowing: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f647\U0001f3fd\u200d\u2642', 'man bowing: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f647\U0001f3fe\u200d\u2642\ufe0f', 'man bowing: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f647\U0001f3fe\u200d\u2642', 'man bowing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f647\U0001f3ff\u200d\u2642\ufe0f', 'man bowing: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f647\U0001f3ff\u200d\u2642', 'man bowing: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\u200d\u2640\ufe0f': EmojiRecord('\U0001f647\u200d\u2640\ufe0f', 'woman bowing', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\u200d\u2640': EmojiRecord('\U0001f647\u200d\u2640', 'woman bowing', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f647\U0001f3fb\u200d\u2640\ufe0f', 'woman bowing: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f647\U0001f3fb\u200d\u2640', 'woman bowing: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f647\U0001f3fc\u200d\u2640\ufe0f', 'woman bowing: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f647\U0001f3fc\u200d\u2640', 'woman bowing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f647\U0001f3fd\u200d\u2640\ufe0f', 'woman bowing: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f647\U0001f3fd\u200d\u2640', 'woman bowing: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f647\U0001f3fe\u200d\u2640\ufe0f', 'woman bowing: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f647\U0001f3fe\u200d\u2640', 'woman bowing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f647\U0001f3ff\u200d\u2640\ufe0f', 'woman bowing: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f647\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f647\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f647\U0001f3ff\u200d\u2640', 'woman bowing: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f647\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926': EmojiRecord('\U0001f926', 'person facepalming', Status.FULLY_QUALIFIED, '3.0', '\U0001f926', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fb': EmojiRecord('\U0001f926\U0001f3fb', 'person facepalming: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f926\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fc': EmojiRecord('\U0001f926\U0001f3fc', 'person facepalming: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f926\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fd': EmojiRecord('\U0001f926\U0001f3fd', 'person facepalming: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f926\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fe': EmojiRecord('\U0001f926\U0001f3fe', 'person facepalming: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f926\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3ff': EmojiRecord('\U0001f926\U0001f3ff', 'person facepalming: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f926\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f926\u200d\u2642\ufe0f': EmojiRecord('\U0001f926\u200d\u2642\ufe0f', 'man facepalming', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\u200d\u2642': EmojiRecord('\U0001f926\u200d\u2642', 'man facepalming', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f926\U0001f3fb\u200d\u2642\ufe0f', 'man facepalming: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f926\U0001f3fb\u200d\u2642', 'man facepalming: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f926\U0001f3fc\u200d\u2642\ufe0f', 'man facepalming: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f926\U0001f3fc\u200d\u2642', 'man facepalming: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f926\U0001f3fd\u200d\u2642\ufe0f', 'man facepalming: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f926\U0001f3fd\u200d\u2642', 'man facepalming: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f926\U0001f3fe\u200d\u2642\ufe0f', 'man facepalming: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f926\U0001f3fe\u200d\u2642', 'man facepalming: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f926\U0001f3ff\u200d\u2642\ufe0f', 'man facepalming: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f926\U0001f3ff\u200d\u2642', 'man facepalming: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\u200d\u2640\ufe0f': EmojiRecord('\U0001f926\u200d\u2640\ufe0f', 'woman facepalming', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\u200d\u2640': EmojiRecord('\U0001f926\u200d\u2640', 'woman facepalming', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f926\U0001f3fb\u200d\u2640\ufe0f', 'woman facepalming: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f926\U0001f3fb\u200d\u2640', 'woman facepalming: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f926\U0001f3fc\u200d\u2640\ufe0f', 'woman facepalming: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f926\U0001f3fc\u200d\u2640', 'woman facepalming: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f926\U0001f3fd\u200d\u2640\ufe0f', 'woman facepalming: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f926\U0001f3fd\u200d\u2640', 'woman facepalming: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f926\U0001f3fe\u200d\u2640\ufe0f', 'woman facepalming: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f926\U0001f3fe\u200d\u2640', 'woman facepalming: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f926\U0001f3ff\u200d\u2640\ufe0f', 'woman facepalming: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f926\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f926\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f926\U0001f3ff\u200d\u2640', 'woman facepalming: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f926\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937': EmojiRecord('\U0001f937', 'person shrugging', Status.FULLY_QUALIFIED, '3.0', '\U0001f937', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fb': EmojiRecord('\U0001f937\U0001f3fb', 'person shrugging: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f937\U0001f3fb', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fc': EmojiRecord('\U0001f937\U0001f3fc', 'person shrugging: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f937\U0001f3fc', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fd': EmojiRecord('\U0001f937\U0001f3fd', 'person shrugging: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f937\U0001f3fd', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fe': EmojiRecord('\U0001f937\U0001f3fe', 'person shrugging: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f937\U0001f3fe', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3ff': EmojiRecord('\U0001f937\U0001f3ff', 'person shrugging: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f937\U0001f3ff', 'People & Body', 'person-gesture'),
    '\U0001f937\u200d\u2642\ufe0f': EmojiRecord('\U0001f937\u200d\u2642\ufe0f', 'man shrugging', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\u200d\u2642': EmojiRecord('\U0001f937\u200d\u2642', 'man shrugging', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f937\U0001f3fb\u200d\u2642\ufe0f', 'man shrugging: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f937\U0001f3fb\u200d\u2642', 'man shrugging: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f937\U0001f3fc\u200d\u2642\ufe0f', 'man shrugging: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f937\U0001f3fc\u200d\u2642', 'man shrugging: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f937\U0001f3fd\u200d\u2642\ufe0f', 'man shrugging: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f937\U0001f3fd\u200d\u2642', 'man shrugging: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f937\U0001f3fe\u200d\u2642\ufe0f', 'man shrugging: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f937\U0001f3fe\u200d\u2642', 'man shrugging: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f937\U0001f3ff\u200d\u2642\ufe0f', 'man shrugging: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f937\U0001f3ff\u200d\u2642', 'man shrugging: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\u200d\u2640\ufe0f': EmojiRecord('\U0001f937\u200d\u2640\ufe0f', 'woman shrugging', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\u200d\u2640': EmojiRecord('\U0001f937\u200d\u2640', 'woman shrugging', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f937\U0001f3fb\u200d\u2640\ufe0f', 'woman shrugging: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f937\U0001f3fb\u200d\u2640', 'woman shrugging: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f937\U0001f3fc\u200d\u2640\ufe0f', 'woman shrugging: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f937\U0001f3fc\u200d\u2640', 'woman shrugging: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f937\U0001f3fd\u200d\u2640\ufe0f', 'woman shrugging: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f937\U0001f3fd\u200d\u2640', 'woman shrugging: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f937\U0001f3fe\u200d\u2640\ufe0f', 'woman shrugging: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f937\U0001f3fe\u200d\u2640', 'woman shrugging: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f937\U0001f3ff\u200d\u2640\ufe0f', 'woman shrugging: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f937\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f937\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f937\U0001f3ff\u200d\u2640', 'woman shrugging: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f937\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-gesture'),
    '\U0001f9d1\u200d\u2695\ufe0f': EmojiRecord('\U0001f9d1\u200d\u2695\ufe0f', 'health worker', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\u2695': EmojiRecord('\U0001f9d1\u200d\u2695', 'health worker', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\u2695\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2695\ufe0f', 'health worker: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\u2695': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2695', 'health worker: light skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\u2695\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2695\ufe0f', 'health worker: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\u2695': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2695', 'health worker: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\u2695\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2695\ufe0f', 'health worker: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\u2695': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2695', 'health worker: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\u2695\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2695\ufe0f', 'health worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\u2695': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2695', 'health worker: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\u2695\ufe0f': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2695\ufe0f', 'health worker: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\u2695': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2695', 'health worker: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\u200d\u2695\ufe0f': EmojiRecord('\U0001f468\u200d\u2695\ufe0f', 'man health worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\u200d\u2695': EmojiRecord('\U0001f468\u200d\u2695', 'man health worker', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\u2695\ufe0f': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2695\ufe0f', 'man health worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\u2695': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2695', 'man health worker: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\u2695\ufe0f': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2695\ufe0f', 'man health worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\u2695': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2695', 'man health worker: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\u2695\ufe0f': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2695\ufe0f', 'man health worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\u2695': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2695', 'man health worker: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\u2695\ufe0f': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2695\ufe0f', 'man health worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\u2695': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2695', 'man health worker: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\u2695\ufe0f': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2695\ufe0f', 'man health worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\u2695': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2695', 'man health worker: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\u200d\u2695\ufe0f': EmojiRecord('\U0001f469\u200d\u2695\ufe0f', 'woman health worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\u200d\u2695': EmojiRecord('\U0001f469\u200d\u2695', 'woman health worker', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\u2695\ufe0f': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2695\ufe0f', 'woman health worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\u2695': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2695', 'woman health worker: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\u2695\ufe0f': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2695\ufe0f', 'woman health worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\u2695': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2695', 'woman health worker: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\u2695\ufe0f': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2695\ufe0f', 'woman health worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\u2695': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2695', 'woman health worker: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\u2695\ufe0f': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2695\ufe0f', 'woman health worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\u2695': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2695', 'woman health worker: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\u2695\ufe0f': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2695\ufe0f', 'woman health worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\u2695': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2695', 'woman health worker: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\u2695\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f393': EmojiRecord('\U0001f9d1\u200d\U0001f393', 'student', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f393': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f393', 'student: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f393': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f393', 'student: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f393': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f393', 'student: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f393': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f393', 'student: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f393': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f393', 'student: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f393': EmojiRecord('\U0001f468\u200d\U0001f393', 'man student', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f393': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f393', 'man student: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f393': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f393', 'man student: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f393': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f393', 'man student: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f393': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f393', 'man student: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f393': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f393', 'man student: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f393': EmojiRecord('\U0001f469\u200d\U0001f393', 'woman student', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f393': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f393', 'woman student: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f393': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f393', 'woman student: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f393': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f393', 'woman student: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f393': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f393', 'woman student: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f393': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f393', 'woman student: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f393', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f3eb': EmojiRecord('\U0001f9d1\u200d\U0001f3eb', 'teacher', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f3eb': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f3eb', 'teacher: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f3eb': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f3eb', 'teacher: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f3eb': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f3eb', 'teacher: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f3eb': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f3eb', 'teacher: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f3eb': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f3eb', 'teacher: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f3eb': EmojiRecord('\U0001f468\u200d\U0001f3eb', 'man teacher', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f3eb': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f3eb', 'man teacher: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f3eb': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f3eb', 'man teacher: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f3eb': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f3eb', 'man teacher: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f3eb': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f3eb', 'man teacher: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f3eb': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f3eb', 'man teacher: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f3eb': EmojiRecord('\U0001f469\u200d\U0001f3eb', 'woman teacher', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f3eb': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f3eb', 'woman teacher: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f3eb': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f3eb', 'woman teacher: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f3eb': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f3eb', 'woman teacher: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f3eb': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f3eb', 'woman teacher: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f3eb': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f3eb', 'woman teacher: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f3eb', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\u2696\ufe0f': EmojiRecord('\U0001f9d1\u200d\u2696\ufe0f', 'judge', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\u2696': EmojiRecord('\U0001f9d1\u200d\u2696', 'judge', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\u2696\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2696\ufe0f', 'judge: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\u2696': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2696', 'judge: light skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\u2696\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2696\ufe0f', 'judge: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\u2696': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2696', 'judge: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\u2696\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2696\ufe0f', 'judge: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\u2696': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2696', 'judge: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\u2696\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2696\ufe0f', 'judge: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\u2696': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2696', 'judge: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\u2696\ufe0f': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2696\ufe0f', 'judge: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\u2696': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2696', 'judge: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\u200d\u2696\ufe0f': EmojiRecord('\U0001f468\u200d\u2696\ufe0f', 'man judge', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\u200d\u2696': EmojiRecord('\U0001f468\u200d\u2696', 'man judge', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\u2696\ufe0f': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2696\ufe0f', 'man judge: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\u2696': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2696', 'man judge: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\u2696\ufe0f': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2696\ufe0f', 'man judge: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\u2696': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2696', 'man judge: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\u2696\ufe0f': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2696\ufe0f', 'man judge: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\u2696': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2696', 'man judge: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\u2696\ufe0f': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2696\ufe0f', 'man judge: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\u2696': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2696', 'man judge: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\u2696\ufe0f': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2696\ufe0f', 'man judge: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\u2696': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2696', 'man judge: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\u200d\u2696\ufe0f': EmojiRecord('\U0001f469\u200d\u2696\ufe0f', 'woman judge', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\u200d\u2696': EmojiRecord('\U0001f469\u200d\u2696', 'woman judge', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\u2696\ufe0f': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2696\ufe0f', 'woman judge: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\u2696': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2696', 'woman judge: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\u2696\ufe0f': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2696\ufe0f', 'woman judge: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\u2696': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2696', 'woman judge: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\u2696\ufe0f': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2696\ufe0f', 'woman judge: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\u2696': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2696', 'woman judge: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\u2696\ufe0f': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2696\ufe0f', 'woman judge: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\u2696': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2696', 'woman judge: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\u2696\ufe0f': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2696\ufe0f', 'woman judge: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\u2696': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2696', 'woman judge: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\u2696\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f33e': EmojiRecord('\U0001f9d1\u200d\U0001f33e', 'farmer', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f33e': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f33e', 'farmer: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f33e': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f33e', 'farmer: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f33e': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f33e', 'farmer: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f33e': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f33e', 'farmer: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f33e': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f33e', 'farmer: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f33e': EmojiRecord('\U0001f468\u200d\U0001f33e', 'man farmer', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f33e': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f33e', 'man farmer: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f33e': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f33e', 'man farmer: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f33e': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f33e', 'man farmer: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f33e': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f33e', 'man farmer: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f33e': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f33e', 'man farmer: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f33e': EmojiRecord('\U0001f469\u200d\U0001f33e', 'woman farmer', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f33e': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f33e', 'woman farmer: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f33e': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f33e', 'woman farmer: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f33e': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f33e', 'woman farmer: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f33e': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f33e', 'woman farmer: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f33e': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f33e', 'woman farmer: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f33e', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f373': EmojiRecord('\U0001f9d1\u200d\U0001f373', 'cook', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f373': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f373', 'cook: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f373': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f373', 'cook: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f373': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f373', 'cook: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f373': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f373', 'cook: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f373': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f373', 'cook: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f373': EmojiRecord('\U0001f468\u200d\U0001f373', 'man cook', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f373': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f373', 'man cook: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f373': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f373', 'man cook: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f373': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f373', 'man cook: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f373': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f373', 'man cook: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f373': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f373', 'man cook: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f373': EmojiRecord('\U0001f469\u200d\U0001f373', 'woman cook', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f373': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f373', 'woman cook: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f373': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f373', 'woman cook: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f373': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f373', 'woman cook: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f373': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f373', 'woman cook: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f373': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f373', 'woman cook: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f373', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f527': EmojiRecord('\U0001f9d1\u200d\U0001f527', 'mechanic', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f527': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f527', 'mechanic: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f527': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f527', 'mechanic: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f527': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f527', 'mechanic: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f527': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f527', 'mechanic: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f527': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f527', 'mechanic: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f527': EmojiRecord('\U0001f468\u200d\U0001f527', 'man mechanic', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f527': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f527', 'man mechanic: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f527': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f527', 'man mechanic: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f527': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f527', 'man mechanic: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f527': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f527', 'man mechanic: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f527': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f527', 'man mechanic: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f527': EmojiRecord('\U0001f469\u200d\U0001f527', 'woman mechanic', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f527': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f527', 'woman mechanic: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f527': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f527', 'woman mechanic: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f527': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f527', 'woman mechanic: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f527': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f527', 'woman mechanic: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f527': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f527', 'woman mechanic: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f527', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f3ed': EmojiRecord('\U0001f9d1\u200d\U0001f3ed', 'factory worker', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f3ed': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f3ed', 'factory worker: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f3ed': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f3ed', 'factory worker: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f3ed': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f3ed', 'factory worker: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f3ed': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f3ed', 'factory worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f3ed': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f3ed', 'factory worker: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f3ed': EmojiRecord('\U0001f468\u200d\U0001f3ed', 'man factory worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f3ed': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f3ed', 'man factory worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f3ed': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f3ed', 'man factory worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f3ed': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f3ed', 'man factory worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f3ed': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f3ed', 'man factory worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f3ed': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f3ed', 'man factory worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f3ed': EmojiRecord('\U0001f469\u200d\U0001f3ed', 'woman factory worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f3ed': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f3ed', 'woman factory worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f3ed': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f3ed', 'woman factory worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f3ed': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f3ed', 'woman factory worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f3ed': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f3ed', 'woman factory worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f3ed': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f3ed', 'woman factory worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f3ed', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f4bc': EmojiRecord('\U0001f9d1\u200d\U0001f4bc', 'office worker', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f4bc': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f4bc', 'office worker: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f4bc': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f4bc', 'office worker: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f4bc': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f4bc', 'office worker: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f4bc': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f4bc', 'office worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f4bc': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f4bc', 'office worker: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f4bc': EmojiRecord('\U0001f468\u200d\U0001f4bc', 'man office worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f4bc': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f4bc', 'man office worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f4bc': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f4bc', 'man office worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f4bc': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f4bc', 'man office worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f4bc': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f4bc', 'man office worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f4bc': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f4bc', 'man office worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f4bc': EmojiRecord('\U0001f469\u200d\U0001f4bc', 'woman office worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f4bc': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f4bc', 'woman office worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f4bc': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f4bc', 'woman office worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f4bc': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f4bc', 'woman office worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f4bc': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f4bc', 'woman office worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f4bc': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f4bc', 'woman office worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f4bc', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f52c': EmojiRecord('\U0001f9d1\u200d\U0001f52c', 'scientist', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f52c': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f52c', 'scientist: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f52c': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f52c', 'scientist: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f52c': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f52c', 'scientist: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f52c': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f52c', 'scientist: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f52c': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f52c', 'scientist: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f52c': EmojiRecord('\U0001f468\u200d\U0001f52c', 'man scientist', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f52c': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f52c', 'man scientist: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f52c': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f52c', 'man scientist: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f52c': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f52c', 'man scientist: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f52c': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f52c', 'man scientist: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f52c': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f52c', 'man scientist: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f52c': EmojiRecord('\U0001f469\u200d\U0001f52c', 'woman scientist', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f52c': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f52c', 'woman scientist: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f52c': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f52c', 'woman scientist: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f52c': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f52c', 'woman scientist: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f52c': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f52c', 'woman scientist: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f52c': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f52c', 'woman scientist: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f52c', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f4bb': EmojiRecord('\U0001f9d1\u200d\U0001f4bb', 'technologist', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f4bb': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f4bb', 'technologist: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f4bb': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f4bb', 'technologist: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f4bb': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f4bb', 'technologist: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f4bb': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f4bb', 'technologist: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f4bb': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f4bb', 'technologist: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f4bb': EmojiRecord('\U0001f468\u200d\U0001f4bb', 'man technologist', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f4bb': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f4bb', 'man technologist: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f4bb': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f4bb', 'man technologist: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f4bb': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f4bb', 'man technologist: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f4bb': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f4bb', 'man technologist: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f4bb': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f4bb', 'man technologist: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f4bb': EmojiRecord('\U0001f469\u200d\U0001f4bb', 'woman technologist', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f4bb': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f4bb', 'woman technologist: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f4bb': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f4bb', 'woman technologist: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f4bb': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f4bb', 'woman technologist: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f4bb': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f4bb', 'woman technologist: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f4bb': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f4bb', 'woman technologist: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f4bb', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f3a4': EmojiRecord('\U0001f9d1\u200d\U0001f3a4', 'singer', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f3a4': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f3a4', 'singer: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f3a4': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f3a4', 'singer: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f3a4': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f3a4', 'singer: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f3a4': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f3a4', 'singer: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f3a4': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f3a4', 'singer: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f3a4': EmojiRecord('\U0001f468\u200d\U0001f3a4', 'man singer', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f3a4': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f3a4', 'man singer: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f3a4': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f3a4', 'man singer: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f3a4': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f3a4', 'man singer: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f3a4': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f3a4', 'man singer: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f3a4': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f3a4', 'man singer: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f3a4': EmojiRecord('\U0001f469\u200d\U0001f3a4', 'woman singer', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f3a4': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f3a4', 'woman singer: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f3a4': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f3a4', 'woman singer: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f3a4': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f3a4', 'woman singer: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f3a4': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f3a4', 'woman singer: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f3a4': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f3a4', 'woman singer: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f3a4', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f3a8': EmojiRecord('\U0001f9d1\u200d\U0001f3a8', 'artist', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f3a8': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f3a8', 'artist: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f3a8': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f3a8', 'artist: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f3a8': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f3a8', 'artist: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f3a8': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f3a8', 'artist: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f3a8': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f3a8', 'artist: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f3a8': EmojiRecord('\U0001f468\u200d\U0001f3a8', 'man artist', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f3a8': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f3a8', 'man artist: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f3a8': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f3a8', 'man artist: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f3a8': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f3a8', 'man artist: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f3a8': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f3a8', 'man artist: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f3a8': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f3a8', 'man artist: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f3a8': EmojiRecord('\U0001f469\u200d\U0001f3a8', 'woman artist', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f3a8': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f3a8', 'woman artist: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f3a8': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f3a8', 'woman artist: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f3a8': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f3a8', 'woman artist: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f3a8': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f3a8', 'woman artist: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f3a8': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f3a8', 'woman artist: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f3a8', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\u2708\ufe0f': EmojiRecord('\U0001f9d1\u200d\u2708\ufe0f', 'pilot', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\u2708': EmojiRecord('\U0001f9d1\u200d\u2708', 'pilot', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\u2708\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2708\ufe0f', 'pilot: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\u2708': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2708', 'pilot: light skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\u2708\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2708\ufe0f', 'pilot: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\u2708': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2708', 'pilot: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\u2708\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2708\ufe0f', 'pilot: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\u2708': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2708', 'pilot: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\u2708\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2708\ufe0f', 'pilot: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\u2708': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2708', 'pilot: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\u2708\ufe0f': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2708\ufe0f', 'pilot: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\u2708': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2708', 'pilot: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\u200d\u2708\ufe0f': EmojiRecord('\U0001f468\u200d\u2708\ufe0f', 'man pilot', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\u200d\u2708': EmojiRecord('\U0001f468\u200d\u2708', 'man pilot', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\u2708\ufe0f': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2708\ufe0f', 'man pilot: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\u2708': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2708', 'man pilot: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\u2708\ufe0f': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2708\ufe0f', 'man pilot: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\u2708': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2708', 'man pilot: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\u2708\ufe0f': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2708\ufe0f', 'man pilot: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\u2708': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2708', 'man pilot: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\u2708\ufe0f': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2708\ufe0f', 'man pilot: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\u2708': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2708', 'man pilot: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\u2708\ufe0f': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2708\ufe0f', 'man pilot: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\u2708': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2708', 'man pilot: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\u200d\u2708\ufe0f': EmojiRecord('\U0001f469\u200d\u2708\ufe0f', 'woman pilot', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\u200d\u2708': EmojiRecord('\U0001f469\u200d\u2708', 'woman pilot', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\u2708\ufe0f': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2708\ufe0f', 'woman pilot: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\u2708': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2708', 'woman pilot: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\u2708\ufe0f': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2708\ufe0f', 'woman pilot: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\u2708': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2708', 'woman pilot: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\u2708\ufe0f': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2708\ufe0f', 'woman pilot: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\u2708': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2708', 'woman pilot: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\u2708\ufe0f': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2708\ufe0f', 'woman pilot: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\u2708': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2708', 'woman pilot: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\u2708\ufe0f': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2708\ufe0f', 'woman pilot: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\u2708': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2708', 'woman pilot: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\u2708\ufe0f', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f680': EmojiRecord('\U0001f9d1\u200d\U0001f680', 'astronaut', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f680': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f680', 'astronaut: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f680': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f680', 'astronaut: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f680': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f680', 'astronaut: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f680': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f680', 'astronaut: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f680': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f680', 'astronaut: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f680': EmojiRecord('\U0001f468\u200d\U0001f680', 'man astronaut', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f680': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f680', 'man astronaut: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f680': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f680', 'man astronaut: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f680': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f680', 'man astronaut: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f680': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f680', 'man astronaut: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f680': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f680', 'man astronaut: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f680': EmojiRecord('\U0001f469\u200d\U0001f680', 'woman astronaut', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f680': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f680', 'woman astronaut: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f680': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f680', 'woman astronaut: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f680': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f680', 'woman astronaut: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f680': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f680', 'woman astronaut: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f680': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f680', 'woman astronaut: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f680', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f692': EmojiRecord('\U0001f9d1\u200d\U0001f692', 'firefighter', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f692': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f692', 'firefighter: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f692': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f692', 'firefighter: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f692': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f692', 'firefighter: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f692': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f692', 'firefighter: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f692': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f692', 'firefighter: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f692': EmojiRecord('\U0001f468\u200d\U0001f692', 'man firefighter', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f692': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f692', 'man firefighter: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fb\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f692': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f692', 'man firefighter: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fc\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f692': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f692', 'man firefighter: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fd\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f692': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f692', 'man firefighter: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3fe\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f692': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f692', 'man firefighter: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\U0001f3ff\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f692': EmojiRecord('\U0001f469\u200d\U0001f692', 'woman firefighter', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f692': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f692', 'woman firefighter: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fb\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f692': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f692', 'woman firefighter: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fc\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f692': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f692', 'woman firefighter: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fd\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f692': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f692', 'woman firefighter: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3fe\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f692': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f692', 'woman firefighter: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\U0001f3ff\u200d\U0001f692', 'People & Body', 'person-role'),
    '\U0001f46e': EmojiRecord('\U0001f46e', 'police officer', Status.FULLY_QUALIFIED, '0.6', '\U0001f46e', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fb': EmojiRecord('\U0001f46e\U0001f3fb', 'police officer: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f46e\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fc': EmojiRecord('\U0001f46e\U0001f3fc', 'police officer: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f46e\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fd': EmojiRecord('\U0001f46e\U0001f3fd', 'police officer: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f46e\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fe': EmojiRecord('\U0001f46e\U0001f3fe', 'police officer: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f46e\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3ff': EmojiRecord('\U0001f46e\U0001f3ff', 'police officer: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f46e\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f46e\u200d\u2642\ufe0f': EmojiRecord('\U0001f46e\u200d\u2642\ufe0f', 'man police officer', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\u200d\u2642': EmojiRecord('\U0001f46e\u200d\u2642', 'man police officer', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f46e\U0001f3fb\u200d\u2642\ufe0f', 'man police officer: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f46e\U0001f3fb\u200d\u2642', 'man police officer: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f46e\U0001f3fc\u200d\u2642\ufe0f', 'man police officer: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f46e\U0001f3fc\u200d\u2642', 'man police officer: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f46e\U0001f3fd\u200d\u2642\ufe0f', 'man police officer: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f46e\U0001f3fd\u200d\u2642', 'man police officer: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f46e\U0001f3fe\u200d\u2642\ufe0f', 'man police officer: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f46e\U0001f3fe\u200d\u2642', 'man police officer: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f46e\U0001f3ff\u200d\u2642\ufe0f', 'man police officer: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f46e\U0001f3ff\u200d\u2642', 'man police officer: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\u200d\u2640\ufe0f': EmojiRecord('\U0001f46e\u200d\u2640\ufe0f', 'woman police officer', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\u200d\u2640': EmojiRecord('\U0001f46e\u200d\u2640', 'woman police officer', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f46e\U0001f3fb\u200d\u2640\ufe0f', 'woman police officer: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f46e\U0001f3fb\u200d\u2640', 'woman police officer: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f46e\U0001f3fc\u200d\u2640\ufe0f', 'woman police officer: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f46e\U0001f3fc\u200d\u2640', 'woman police officer: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f46e\U0001f3fd\u200d\u2640\ufe0f', 'woman police officer: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f46e\U0001f3fd\u200d\u2640', 'woman police officer: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f46e\U0001f3fe\u200d\u2640\ufe0f', 'woman police officer: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f46e\U0001f3fe\u200d\u2640', 'woman police officer: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f46e\U0001f3ff\u200d\u2640\ufe0f', 'woman police officer: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f46e\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f46e\U0001f3ff\u200d\u2640', 'woman police officer: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46e\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\ufe0f': EmojiRecord('\U0001f575\ufe0f', 'detective', Status.FULLY_QUALIFIED, '0.7', '\U0001f575\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575': EmojiRecord('\U0001f575', 'detective', Status.UNQUALIFIED, '0.7', '\U0001f575\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fb': EmojiRecord('\U0001f575\U0001f3fb', 'detective: light skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f575\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fc': EmojiRecord('\U0001f575\U0001f3fc', 'detective: medium-light skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f575\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fd': EmojiRecord('\U0001f575\U0001f3fd', 'detective: medium skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f575\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fe': EmojiRecord('\U0001f575\U0001f3fe', 'detective: medium-dark skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f575\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3ff': EmojiRecord('\U0001f575\U0001f3ff', 'detective: dark skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f575\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f575\ufe0f\u200d\u2642\ufe0f': EmojiRecord('\U0001f575\ufe0f\u200d\u2642\ufe0f', 'man detective', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\u200d\u2642\ufe0f': EmojiRecord('\U0001f575\u200d\u2642\ufe0f', 'man detective', Status.UNQUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\ufe0f\u200d\u2642': EmojiRecord('\U0001f575\ufe0f\u200d\u2642', 'man detective', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\u200d\u2642': EmojiRecord('\U0001f575\u200d\u2642', 'man detective', Status.UNQUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f575\U0001f3fb\u200d\u2642\ufe0f', 'man detective: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f575\U0001f3fb\u200d\u2642', 'man detective: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f575\U0001f3fc\u200d\u2642\ufe0f', 'man detective: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f575\U0001f3fc\u200d\u2642', 'man detective: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f575\U0001f3fd\u200d\u2642\ufe0f', 'man detective: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f575\U0001f3fd\u200d\u2642', 'man detective: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f575\U0001f3fe\u200d\u2642\ufe0f', 'man detective: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f575\U0001f3fe\u200d\u2642', 'man detective: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f575\U0001f3ff\u200d\u2642\ufe0f', 'man detective: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f575\U0001f3ff\u200d\u2642', 'man detective: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\ufe0f\u200d\u2640\ufe0f': EmojiRecord('\U0001f575\ufe0f\u200d\u2640\ufe0f', 'woman detective', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\u200d\u2640\ufe0f': EmojiRecord('\U0001f575\u200d\u2640\ufe0f', 'woman detective', Status.UNQUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\ufe0f\u200d\u2640': EmojiRecord('\U0001f575\ufe0f\u200d\u2640', 'woman detective', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\u200d\u2640': EmojiRecord('\U0001f575\u200d\u2640', 'woman detective', Status.UNQUALIFIED, '4.0', '\U0001f575\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f575\U0001f3fb\u200d\u2640\ufe0f', 'woman detective: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f575\U0001f3fb\u200d\u2640', 'woman detective: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f575\U0001f3fc\u200d\u2640\ufe0f', 'woman detective: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f575\U0001f3fc\u200d\u2640', 'woman detective: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f575\U0001f3fd\u200d\u2640\ufe0f', 'woman detective: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f575\U0001f3fd\u200d\u2640', 'woman detective: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f575\U0001f3fe\u200d\u2640\ufe0f', 'woman detective: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f575\U0001f3fe\u200d\u2640', 'woman detective: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f575\U0001f3ff\u200d\u2640\ufe0f', 'woman detective: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f575\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f575\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f575\U0001f3ff\u200d\u2640', 'woman detective: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f575\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482': EmojiRecord('\U0001f482', 'guard', Status.FULLY_QUALIFIED, '0.6', '\U0001f482', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fb': EmojiRecord('\U0001f482\U0001f3fb', 'guard: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f482\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fc': EmojiRecord('\U0001f482\U0001f3fc', 'guard: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f482\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fd': EmojiRecord('\U0001f482\U0001f3fd', 'guard: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f482\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fe': EmojiRecord('\U0001f482\U0001f3fe', 'guard: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f482\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3ff': EmojiRecord('\U0001f482\U0001f3ff', 'guard: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f482\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f482\u200d\u2642\ufe0f': EmojiRecord('\U0001f482\u200d\u2642\ufe0f', 'man guard', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\u200d\u2642': EmojiRecord('\U0001f482\u200d\u2642', 'man guard', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f482\U0001f3fb\u200d\u2642\ufe0f', 'man guard: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f482\U0001f3fb\u200d\u2642', 'man guard: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f482\U0001f3fc\u200d\u2642\ufe0f', 'man guard: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f482\U0001f3fc\u200d\u2642', 'man guard: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f482\U0001f3fd\u200d\u2642\ufe0f', 'man guard: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f482\U0001f3fd\u200d\u2642', 'man guard: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f482\U0001f3fe\u200d\u2642\ufe0f', 'man guard: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f482\U0001f3fe\u200d\u2642', 'man guard: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f482\U0001f3ff\u200d\u2642\ufe0f', 'man guard: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f482\U0001f3ff\u200d\u2642', 'man guard: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\u200d\u2640\ufe0f': EmojiRecord('\U0001f482\u200d\u2640\ufe0f', 'woman guard', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\u200d\u2640': EmojiRecord('\U0001f482\u200d\u2640', 'woman guard', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f482\U0001f3fb\u200d\u2640\ufe0f', 'woman guard: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f482\U0001f3fb\u200d\u2640', 'woman guard: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f482\U0001f3fc\u200d\u2640\ufe0f', 'woman guard: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f482\U0001f3fc\u200d\u2640', 'woman guard: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f482\U0001f3fd\u200d\u2640\ufe0f', 'woman guard: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f482\U0001f3fd\u200d\u2640', 'woman guard: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f482\U0001f3fe\u200d\u2640\ufe0f', 'woman guard: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f482\U0001f3fe\u200d\u2640', 'woman guard: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f482\U0001f3ff\u200d\u2640\ufe0f', 'woman guard: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f482\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f482\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f482\U0001f3ff\u200d\u2640', 'woman guard: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f482\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f977': EmojiRecord('\U0001f977', 'ninja', Status.FULLY_QUALIFIED, '13.0', '\U0001f977', 'People & Body', 'person-role'),
    '\U0001f977\U0001f3fb': EmojiRecord('\U0001f977\U0001f3fb', 'ninja: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f977\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f977\U0001f3fc': EmojiRecord('\U0001f977\U0001f3fc', 'ninja: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f977\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f977\U0001f3fd': EmojiRecord('\U0001f977\U0001f3fd', 'ninja: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f977\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f977\U0001f3fe': EmojiRecord('\U0001f977\U0001f3fe', 'ninja: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f977\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f977\U0001f3ff': EmojiRecord('\U0001f977\U0001f3ff', 'ninja: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f977\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f477': EmojiRecord('\U0001f477', 'construction worker', Status.FULLY_QUALIFIED, '0.6', '\U0001f477', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fb': EmojiRecord('\U0001f477\U0001f3fb', 'construction worker: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f477\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fc': EmojiRecord('\U0001f477\U0001f3fc', 'construction worker: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f477\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fd': EmojiRecord('\U0001f477\U0001f3fd', 'construction worker: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f477\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fe': EmojiRecord('\U0001f477\U0001f3fe', 'construction worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f477\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3ff': EmojiRecord('\U0001f477\U0001f3ff', 'construction worker: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f477\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f477\u200d\u2642\ufe0f': EmojiRecord('\U0001f477\u200d\u2642\ufe0f', 'man construction worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\u200d\u2642': EmojiRecord('\U0001f477\u200d\u2642', 'man construction worker', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f477\U0001f3fb\u200d\u2642\ufe0f', 'man construction worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f477\U0001f3fb\u200d\u2642', 'man construction worker: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f477\U0001f3fc\u200d\u2642\ufe0f', 'man construction worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f477\U0001f3fc\u200d\u2642', 'man construction worker: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f477\U0001f3fd\u200d\u2642\ufe0f', 'man construction worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f477\U0001f3fd\u200d\u2642', 'man construction worker: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f477\U0001f3fe\u200d\u2642\ufe0f', 'man construction worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f477\U0001f3fe\u200d\u2642', 'man construction worker: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f477\U0001f3ff\u200d\u2642\ufe0f', 'man construction worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f477\U0001f3ff\u200d\u2642', 'man construction worker: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\u200d\u2640\ufe0f': EmojiRecord('\U0001f477\u200d\u2640\ufe0f', 'woman construction worker', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\u200d\u2640': EmojiRecord('\U0001f477\u200d\u2640', 'woman construction worker', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f477\U0001f3fb\u200d\u2640\ufe0f', 'woman construction worker: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f477\U0001f3fb\u200d\u2640', 'woman construction worker: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f477\U0001f3fc\u200d\u2640\ufe0f', 'woman construction worker: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f477\U0001f3fc\u200d\u2640', 'woman construction worker: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f477\U0001f3fd\u200d\u2640\ufe0f', 'woman construction worker: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f477\U0001f3fd\u200d\u2640', 'woman construction worker: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f477\U0001f3fe\u200d\u2640\ufe0f', 'woman construction worker: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f477\U0001f3fe\u200d\u2640', 'woman construction worker: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f477\U0001f3ff\u200d\u2640\ufe0f', 'woman construction worker: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f477\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f477\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f477\U0001f3ff\u200d\u2640', 'woman construction worker: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f477\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001fac5': EmojiRecord('\U0001fac5', 'person with crown', Status.FULLY_QUALIFIED, '14.0', '\U0001fac5', 'People & Body', 'person-role'),
    '\U0001fac5\U0001f3fb': EmojiRecord('\U0001fac5\U0001f3fb', 'person with crown: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac5\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001fac5\U0001f3fc': EmojiRecord('\U0001fac5\U0001f3fc', 'person with crown: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac5\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001fac5\U0001f3fd': EmojiRecord('\U0001fac5\U0001f3fd', 'person with crown: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac5\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001fac5\U0001f3fe': EmojiRecord('\U0001fac5\U0001f3fe', 'person with crown: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac5\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001fac5\U0001f3ff': EmojiRecord('\U0001fac5\U0001f3ff', 'person with crown: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac5\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f934': EmojiRecord('\U0001f934', 'prince', Status.FULLY_QUALIFIED, '3.0', '\U0001f934', 'People & Body', 'person-role'),
    '\U0001f934\U0001f3fb': EmojiRecord('\U0001f934\U0001f3fb', 'prince: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f934\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f934\U0001f3fc': EmojiRecord('\U0001f934\U0001f3fc', 'prince: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f934\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f934\U0001f3fd': EmojiRecord('\U0001f934\U0001f3fd', 'prince: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f934\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f934\U0001f3fe': EmojiRecord('\U0001f934\U0001f3fe', 'prince: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f934\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f934\U0001f3ff': EmojiRecord('\U0001f934\U0001f3ff', 'prince: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f934\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f478': EmojiRecord('\U0001f478', 'princess', Status.FULLY_QUALIFIED, '0.6', '\U0001f478', 'People & Body', 'person-role'),
    '\U0001f478\U0001f3fb': EmojiRecord('\U0001f478\U0001f3fb', 'princess: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f478\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f478\U0001f3fc': EmojiRecord('\U0001f478\U0001f3fc', 'princess: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f478\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f478\U0001f3fd': EmojiRecord('\U0001f478\U0001f3fd', 'princess: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f478\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f478\U0001f3fe': EmojiRecord('\U0001f478\U0001f3fe', 'princess: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f478\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f478\U0001f3ff': EmojiRecord('\U0001f478\U0001f3ff', 'princess: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f478\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f473': EmojiRecord('\U0001f473', 'person wearing turban', Status.FULLY_QUALIFIED, '0.6', '\U0001f473', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fb': EmojiRecord('\U0001f473\U0001f3fb', 'person wearing turban: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f473\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fc': EmojiRecord('\U0001f473\U0001f3fc', 'person wearing turban: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f473\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fd': EmojiRecord('\U0001f473\U0001f3fd', 'person wearing turban: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f473\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fe': EmojiRecord('\U0001f473\U0001f3fe', 'person wearing turban: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f473\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3ff': EmojiRecord('\U0001f473\U0001f3ff', 'person wearing turban: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f473\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f473\u200d\u2642\ufe0f': EmojiRecord('\U0001f473\u200d\u2642\ufe0f', 'man wearing turban', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\u200d\u2642': EmojiRecord('\U0001f473\u200d\u2642', 'man wearing turban', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f473\U0001f3fb\u200d\u2642\ufe0f', 'man wearing turban: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f473\U0001f3fb\u200d\u2642', 'man wearing turban: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f473\U0001f3fc\u200d\u2642\ufe0f', 'man wearing turban: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f473\U0001f3fc\u200d\u2642', 'man wearing turban: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f473\U0001f3fd\u200d\u2642\ufe0f', 'man wearing turban: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f473\U0001f3fd\u200d\u2642', 'man wearing turban: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f473\U0001f3fe\u200d\u2642\ufe0f', 'man wearing turban: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f473\U0001f3fe\u200d\u2642', 'man wearing turban: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f473\U0001f3ff\u200d\u2642\ufe0f', 'man wearing turban: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f473\U0001f3ff\u200d\u2642', 'man wearing turban: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\u200d\u2640\ufe0f': EmojiRecord('\U0001f473\u200d\u2640\ufe0f', 'woman wearing turban', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\u200d\u2640': EmojiRecord('\U0001f473\u200d\u2640', 'woman wearing turban', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f473\U0001f3fb\u200d\u2640\ufe0f', 'woman wearing turban: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f473\U0001f3fb\u200d\u2640', 'woman wearing turban: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f473\U0001f3fc\u200d\u2640\ufe0f', 'woman wearing turban: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f473\U0001f3fc\u200d\u2640', 'woman wearing turban: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f473\U0001f3fd\u200d\u2640\ufe0f', 'woman wearing turban: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f473\U0001f3fd\u200d\u2640', 'woman wearing turban: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f473\U0001f3fe\u200d\u2640\ufe0f', 'woman wearing turban: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f473\U0001f3fe\u200d\u2640', 'woman wearing turban: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f473\U0001f3ff\u200d\u2640\ufe0f', 'woman wearing turban: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f473\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f473\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f473\U0001f3ff\u200d\u2640', 'woman wearing turban: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f473\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f472': EmojiRecord('\U0001f472', 'person with skullcap', Status.FULLY_QUALIFIED, '0.6', '\U0001f472', 'People & Body', 'person-role'),
    '\U0001f472\U0001f3fb': EmojiRecord('\U0001f472\U0001f3fb', 'person with skullcap: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f472\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f472\U0001f3fc': EmojiRecord('\U0001f472\U0001f3fc', 'person with skullcap: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f472\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f472\U0001f3fd': EmojiRecord('\U0001f472\U0001f3fd', 'person with skullcap: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f472\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f472\U0001f3fe': EmojiRecord('\U0001f472\U0001f3fe', 'person with skullcap: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f472\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f472\U0001f3ff': EmojiRecord('\U0001f472\U0001f3ff', 'person with skullcap: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f472\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f9d5': EmojiRecord('\U0001f9d5', 'woman with headscarf', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d5', 'People & Body', 'person-role'),
    '\U0001f9d5\U0001f3fb': EmojiRecord('\U0001f9d5\U0001f3fb', 'woman with headscarf: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d5\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f9d5\U0001f3fc': EmojiRecord('\U0001f9d5\U0001f3fc', 'woman with headscarf: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d5\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f9d5\U0001f3fd': EmojiRecord('\U0001f9d5\U0001f3fd', 'woman with headscarf: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d5\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f9d5\U0001f3fe': EmojiRecord('\U0001f9d5\U0001f3fe', 'woman with headscarf: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d5\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f9d5\U0001f3ff': EmojiRecord('\U0001f9d5\U0001f3ff', 'woman with headscarf: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d5\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f935': EmojiRecord('\U0001f935', 'person in tuxedo', Status.FULLY_QUALIFIED, '3.0', '\U0001f935', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fb': EmojiRecord('\U0001f935\U0001f3fb', 'person in tuxedo: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f935\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fc': EmojiRecord('\U0001f935\U0001f3fc', 'person in tuxedo: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f935\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fd': EmojiRecord('\U0001f935\U0001f3fd', 'person in tuxedo: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f935\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fe': EmojiRecord('\U0001f935\U0001f3fe', 'person in tuxedo: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f935\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3ff': EmojiRecord('\U0001f935\U0001f3ff', 'person in tuxedo: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f935\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f935\u200d\u2642\ufe0f': EmojiRecord('\U0001f935\u200d\u2642\ufe0f', 'man in tuxedo', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\u200d\u2642': EmojiRecord('\U0001f935\u200d\u2642', 'man in tuxedo', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f935\U0001f3fb\u200d\u2642\ufe0f', 'man in tuxedo: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f935\U0001f3fb\u200d\u2642', 'man in tuxedo: light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f935\U0001f3fc\u200d\u2642\ufe0f', 'man in tuxedo: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f935\U0001f3fc\u200d\u2642', 'man in tuxedo: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f935\U0001f3fd\u200d\u2642\ufe0f', 'man in tuxedo: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f935\U0001f3fd\u200d\u2642', 'man in tuxedo: medium skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f935\U0001f3fe\u200d\u2642\ufe0f', 'man in tuxedo: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f935\U0001f3fe\u200d\u2642', 'man in tuxedo: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f935\U0001f3ff\u200d\u2642\ufe0f', 'man in tuxedo: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f935\U0001f3ff\u200d\u2642', 'man in tuxedo: dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\u200d\u2640\ufe0f': EmojiRecord('\U0001f935\u200d\u2640\ufe0f', 'woman in tuxedo', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\u200d\u2640': EmojiRecord('\U0001f935\u200d\u2640', 'woman in tuxedo', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f935\U0001f3fb\u200d\u2640\ufe0f', 'woman in tuxedo: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f935\U0001f3fb\u200d\u2640', 'woman in tuxedo: light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f935\U0001f3fc\u200d\u2640\ufe0f', 'woman in tuxedo: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f935\U0001f3fc\u200d\u2640', 'woman in tuxedo: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f935\U0001f3fd\u200d\u2640\ufe0f', 'woman in tuxedo: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f935\U0001f3fd\u200d\u2640', 'woman in tuxedo: medium skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f935\U0001f3fe\u200d\u2640\ufe0f', 'woman in tuxedo: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f935\U0001f3fe\u200d\u2640', 'woman in tuxedo: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f935\U0001f3ff\u200d\u2640\ufe0f', 'woman in tuxedo: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f935\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f935\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f935\U0001f3ff\u200d\u2640', 'woman in tuxedo: dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f935\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470': EmojiRecord('\U0001f470', 'person with veil', Status.FULLY_QUALIFIED, '0.6', '\U0001f470', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fb': EmojiRecord('\U0001f470\U0001f3fb', 'person with veil: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f470\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fc': EmojiRecord('\U0001f470\U0001f3fc', 'person with veil: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f470\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fd': EmojiRecord('\U0001f470\U0001f3fd', 'person with veil: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f470\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fe': EmojiRecord('\U0001f470\U0001f3fe', 'person with veil: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f470\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3ff': EmojiRecord('\U0001f470\U0001f3ff', 'person with veil: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f470\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f470\u200d\u2642\ufe0f': EmojiRecord('\U0001f470\u200d\u2642\ufe0f', 'man with veil', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\u200d\u2642': EmojiRecord('\U0001f470\u200d\u2642', 'man with veil', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f470\U0001f3fb\u200d\u2642\ufe0f', 'man with veil: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f470\U0001f3fb\u200d\u2642', 'man with veil: light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f470\U0001f3fc\u200d\u2642\ufe0f', 'man with veil: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f470\U0001f3fc\u200d\u2642', 'man with veil: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f470\U0001f3fd\u200d\u2642\ufe0f', 'man with veil: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f470\U0001f3fd\u200d\u2642', 'man with veil: medium skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f470\U0001f3fe\u200d\u2642\ufe0f', 'man with veil: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f470\U0001f3fe\u200d\u2642', 'man with veil: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f470\U0001f3ff\u200d\u2642\ufe0f', 'man with veil: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f470\U0001f3ff\u200d\u2642', 'man with veil: dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\u200d\u2640\ufe0f': EmojiRecord('\U0001f470\u200d\u2640\ufe0f', 'woman with veil', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\u200d\u2640': EmojiRecord('\U0001f470\u200d\u2640', 'woman with veil', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f470\U0001f3fb\u200d\u2640\ufe0f', 'woman with veil: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f470\U0001f3fb\u200d\u2640', 'woman with veil: light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f470\U0001f3fc\u200d\u2640\ufe0f', 'woman with veil: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f470\U0001f3fc\u200d\u2640', 'woman with veil: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f470\U0001f3fd\u200d\u2640\ufe0f', 'woman with veil: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f470\U0001f3fd\u200d\u2640', 'woman with veil: medium skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f470\U0001f3fe\u200d\u2640\ufe0f', 'woman with veil: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f470\U0001f3fe\u200d\u2640', 'woman with veil: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f470\U0001f3ff\u200d\u2640\ufe0f', 'woman with veil: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f470\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f470\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f470\U0001f3ff\u200d\u2640', 'woman with veil: dark skin tone', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f470\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-role'),
    '\U0001f930': EmojiRecord('\U0001f930', 'pregnant woman', Status.FULLY_QUALIFIED, '3.0', '\U0001f930', 'People & Body', 'person-role'),
    '\U0001f930\U0001f3fb': EmojiRecord('\U0001f930\U0001f3fb', 'pregnant woman: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f930\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f930\U0001f3fc': EmojiRecord('\U0001f930\U0001f3fc', 'pregnant woman: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f930\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f930\U0001f3fd': EmojiRecord('\U0001f930\U0001f3fd', 'pregnant woman: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f930\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f930\U0001f3fe': EmojiRecord('\U0001f930\U0001f3fe', 'pregnant woman: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f930\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f930\U0001f3ff': EmojiRecord('\U0001f930\U0001f3ff', 'pregnant woman: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f930\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001fac3': EmojiRecord('\U0001fac3', 'pregnant man', Status.FULLY_QUALIFIED, '14.0', '\U0001fac3', 'People & Body', 'person-role'),
    '\U0001fac3\U0001f3fb': EmojiRecord('\U0001fac3\U0001f3fb', 'pregnant man: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac3\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001fac3\U0001f3fc': EmojiRecord('\U0001fac3\U0001f3fc', 'pregnant man: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac3\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001fac3\U0001f3fd': EmojiRecord('\U0001fac3\U0001f3fd', 'pregnant man: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac3\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001fac3\U0001f3fe': EmojiRecord('\U0001fac3\U0001f3fe', 'pregnant man: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac3\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001fac3\U0001f3ff': EmojiRecord('\U0001fac3\U0001f3ff', 'pregnant man: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac3\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001fac4': EmojiRecord('\U0001fac4', 'pregnant person', Status.FULLY_QUALIFIED, '14.0', '\U0001fac4', 'People & Body', 'person-role'),
    '\U0001fac4\U0001f3fb': EmojiRecord('\U0001fac4\U0001f3fb', 'pregnant person: light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac4\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001fac4\U0001f3fc': EmojiRecord('\U0001fac4\U0001f3fc', 'pregnant person: medium-light skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac4\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001fac4\U0001f3fd': EmojiRecord('\U0001fac4\U0001f3fd', 'pregnant person: medium skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac4\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001fac4\U0001f3fe': EmojiRecord('\U0001fac4\U0001f3fe', 'pregnant person: medium-dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac4\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001fac4\U0001f3ff': EmojiRecord('\U0001fac4\U0001f3ff', 'pregnant person: dark skin tone', Status.FULLY_QUALIFIED, '14.0', '\U0001fac4\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f931': EmojiRecord('\U0001f931', 'breast-feeding', Status.FULLY_QUALIFIED, '5.0', '\U0001f931', 'People & Body', 'person-role'),
    '\U0001f931\U0001f3fb': EmojiRecord('\U0001f931\U0001f3fb', 'breast-feeding: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f931\U0001f3fb', 'People & Body', 'person-role'),
    '\U0001f931\U0001f3fc': EmojiRecord('\U0001f931\U0001f3fc', 'breast-feeding: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f931\U0001f3fc', 'People & Body', 'person-role'),
    '\U0001f931\U0001f3fd': EmojiRecord('\U0001f931\U0001f3fd', 'breast-feeding: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f931\U0001f3fd', 'People & Body', 'person-role'),
    '\U0001f931\U0001f3fe': EmojiRecord('\U0001f931\U0001f3fe', 'breast-feeding: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f931\U0001f3fe', 'People & Body', 'person-role'),
    '\U0001f931\U0001f3ff': EmojiRecord('\U0001f931\U0001f3ff', 'breast-feeding: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f931\U0001f3ff', 'People & Body', 'person-role'),
    '\U0001f469\u200d\U0001f37c': EmojiRecord('\U0001f469\u200d\U0001f37c', 'woman feeding baby', Status.FULLY_QUALIFIED, '13.0', '\U0001f469\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fb\u200d\U0001f37c': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f37c', 'woman feeding baby: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f469\U0001f3fb\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fc\u200d\U0001f37c': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f37c', 'woman feeding baby: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f469\U0001f3fc\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fd\u200d\U0001f37c': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f37c', 'woman feeding baby: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f469\U0001f3fd\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3fe\u200d\U0001f37c': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f37c', 'woman feeding baby: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f469\U0001f3fe\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f469\U0001f3ff\u200d\U0001f37c': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f37c', 'woman feeding baby: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f469\U0001f3ff\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f468\u200d\U0001f37c': EmojiRecord('\U0001f468\u200d\U0001f37c', 'man feeding baby', Status.FULLY_QUALIFIED, '13.0', '\U0001f468\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fb\u200d\U0001f37c': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f37c', 'man feeding baby: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f468\U0001f3fb\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fc\u200d\U0001f37c': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f37c', 'man feeding baby: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f468\U0001f3fc\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fd\u200d\U0001f37c': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f37c', 'man feeding baby: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f468\U0001f3fd\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3fe\u200d\U0001f37c': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f37c', 'man feeding baby: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f468\U0001f3fe\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f468\U0001f3ff\u200d\U0001f37c': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f37c', 'man feeding baby: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f468\U0001f3ff\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f9d1\u200d\U0001f37c': EmojiRecord('\U0001f9d1\u200d\U0001f37c', 'person feeding baby', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f37c': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f37c', 'person feeding baby: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fb\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f37c': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f37c', 'person feeding baby: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fc\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f37c': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f37c', 'person feeding baby: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fd\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f37c': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f37c', 'person feeding baby: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fe\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f37c': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f37c', 'person feeding baby: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3ff\u200d\U0001f37c', 'People & Body', 'person-role'),
    '\U0001f47c': EmojiRecord('\U0001f47c', 'baby angel', Status.FULLY_QUALIFIED, '0.6', '\U0001f47c', 'People & Body', 'person-fantasy'),
    '\U0001f47c\U0001f3fb': EmojiRecord('\U0001f47c\U0001f3fb', 'baby angel: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f47c\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f47c\U0001f3fc': EmojiRecord('\U0001f47c\U0001f3fc', 'baby angel: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f47c\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f47c\U0001f3fd': EmojiRecord('\U0001f47c\U0001f3fd', 'baby angel: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f47c\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f47c\U0001f3fe': EmojiRecord('\U0001f47c\U0001f3fe', 'baby angel: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f47c\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f47c\U0001f3ff': EmojiRecord('\U0001f47c\U0001f3ff', 'baby angel: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f47c\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f385': EmojiRecord('\U0001f385', 'Santa Claus', Status.FULLY_QUALIFIED, '0.6', '\U0001f385', 'People & Body', 'person-fantasy'),
    '\U0001f385\U0001f3fb': EmojiRecord('\U0001f385\U0001f3fb', 'Santa Claus: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f385\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f385\U0001f3fc': EmojiRecord('\U0001f385\U0001f3fc', 'Santa Claus: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f385\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f385\U0001f3fd': EmojiRecord('\U0001f385\U0001f3fd', 'Santa Claus: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f385\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f385\U0001f3fe': EmojiRecord('\U0001f385\U0001f3fe', 'Santa Claus: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f385\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f385\U0001f3ff': EmojiRecord('\U0001f385\U0001f3ff', 'Santa Claus: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f385\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f936': EmojiRecord('\U0001f936', 'Mrs. Claus', Status.FULLY_QUALIFIED, '3.0', '\U0001f936', 'People & Body', 'person-fantasy'),
    '\U0001f936\U0001f3fb': EmojiRecord('\U0001f936\U0001f3fb', 'Mrs. Claus: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f936\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f936\U0001f3fc': EmojiRecord('\U0001f936\U0001f3fc', 'Mrs. Claus: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f936\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f936\U0001f3fd': EmojiRecord('\U0001f936\U0001f3fd', 'Mrs. Claus: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f936\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f936\U0001f3fe': EmojiRecord('\U0001f936\U0001f3fe', 'Mrs. Claus: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f936\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f936\U0001f3ff': EmojiRecord('\U0001f936\U0001f3ff', 'Mrs. Claus: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f936\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9d1\u200d\U0001f384': EmojiRecord('\U0001f9d1\u200d\U0001f384', 'mx claus', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\u200d\U0001f384', 'People & Body', 'person-fantasy'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f384': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f384', 'mx claus: light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fb\u200d\U0001f384', 'People & Body', 'person-fantasy'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f384': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f384', 'mx claus: medium-light skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fc\u200d\U0001f384', 'People & Body', 'person-fantasy'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f384': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f384', 'mx claus: medium skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fd\u200d\U0001f384', 'People & Body', 'person-fantasy'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f384': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f384', 'mx claus: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3fe\u200d\U0001f384', 'People & Body', 'person-fantasy'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f384': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f384', 'mx claus: dark skin tone', Status.FULLY_QUALIFIED, '13.0', '\U0001f9d1\U0001f3ff\u200d\U0001f384', 'People & Body', 'person-fantasy'),
    '\U0001f9b8': EmojiRecord('\U0001f9b8', 'superhero', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fb': EmojiRecord('\U0001f9b8\U0001f3fb', 'superhero: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fc': EmojiRecord('\U0001f9b8\U0001f3fc', 'superhero: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fd': EmojiRecord('\U0001f9b8\U0001f3fd', 'superhero: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fe': EmojiRecord('\U0001f9b8\U0001f3fe', 'superhero: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3ff': EmojiRecord('\U0001f9b8\U0001f3ff', 'superhero: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b8\u200d\u2642\ufe0f', 'man superhero', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\u200d\u2642': EmojiRecord('\U0001f9b8\u200d\u2642', 'man superhero', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fb\u200d\u2642\ufe0f', 'man superhero: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9b8\U0001f3fb\u200d\u2642', 'man superhero: light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fc\u200d\u2642\ufe0f', 'man superhero: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9b8\U0001f3fc\u200d\u2642', 'man superhero: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fd\u200d\u2642\ufe0f', 'man superhero: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9b8\U0001f3fd\u200d\u2642', 'man superhero: medium skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fe\u200d\u2642\ufe0f', 'man superhero: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9b8\U0001f3fe\u200d\u2642', 'man superhero: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b8\U0001f3ff\u200d\u2642\ufe0f', 'man superhero: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9b8\U0001f3ff\u200d\u2642', 'man superhero: dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b8\u200d\u2640\ufe0f', 'woman superhero', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\u200d\u2640': EmojiRecord('\U0001f9b8\u200d\u2640', 'woman superhero', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fb\u200d\u2640\ufe0f', 'woman superhero: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9b8\U0001f3fb\u200d\u2640', 'woman superhero: light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fc\u200d\u2640\ufe0f', 'woman superhero: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9b8\U0001f3fc\u200d\u2640', 'woman superhero: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fd\u200d\u2640\ufe0f', 'woman superhero: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9b8\U0001f3fd\u200d\u2640', 'woman superhero: medium skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b8\U0001f3fe\u200d\u2640\ufe0f', 'woman superhero: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9b8\U0001f3fe\u200d\u2640', 'woman superhero: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b8\U0001f3ff\u200d\u2640\ufe0f', 'woman superhero: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b8\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9b8\U0001f3ff\u200d\u2640', 'woman superhero: dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b8\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9': EmojiRecord('\U0001f9b9', 'supervillain', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fb': EmojiRecord('\U0001f9b9\U0001f3fb', 'supervillain: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fc': EmojiRecord('\U0001f9b9\U0001f3fc', 'supervillain: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fd': EmojiRecord('\U0001f9b9\U0001f3fd', 'supervillain: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fe': EmojiRecord('\U0001f9b9\U0001f3fe', 'supervillain: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3ff': EmojiRecord('\U0001f9b9\U0001f3ff', 'supervillain: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b9\u200d\u2642\ufe0f', 'man supervillain', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\u200d\u2642': EmojiRecord('\U0001f9b9\u200d\u2642', 'man supervillain', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fb\u200d\u2642\ufe0f', 'man supervillain: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9b9\U0001f3fb\u200d\u2642', 'man supervillain: light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fc\u200d\u2642\ufe0f', 'man supervillain: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9b9\U0001f3fc\u200d\u2642', 'man supervillain: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fd\u200d\u2642\ufe0f', 'man supervillain: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9b9\U0001f3fd\u200d\u2642', 'man supervillain: medium skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fe\u200d\u2642\ufe0f', 'man supervillain: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9b9\U0001f3fe\u200d\u2642', 'man supervillain: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9b9\U0001f3ff\u200d\u2642\ufe0f', 'man supervillain: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9b9\U0001f3ff\u200d\u2642', 'man supervillain: dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b9\u200d\u2640\ufe0f', 'woman supervillain', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\u200d\u2640': EmojiRecord('\U0001f9b9\u200d\u2640', 'woman supervillain', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fb\u200d\u2640\ufe0f', 'woman supervillain: light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9b9\U0001f3fb\u200d\u2640', 'woman supervillain: light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fc\u200d\u2640\ufe0f', 'woman supervillain: medium-light skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9b9\U0001f3fc\u200d\u2640', 'woman supervillain: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fd\u200d\u2640\ufe0f', 'woman supervillain: medium skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9b9\U0001f3fd\u200d\u2640', 'woman supervillain: medium skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b9\U0001f3fe\u200d\u2640\ufe0f', 'woman supervillain: medium-dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9b9\U0001f3fe\u200d\u2640', 'woman supervillain: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9b9\U0001f3ff\u200d\u2640\ufe0f', 'woman supervillain: dark skin tone', Status.FULLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9b9\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9b9\U0001f3ff\u200d\u2640', 'woman supervillain: dark skin tone', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f9b9\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9': EmojiRecord('\U0001f9d9', 'mage', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fb': EmojiRecord('\U0001f9d9\U0001f3fb', 'mage: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fc': EmojiRecord('\U0001f9d9\U0001f3fc', 'mage: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fd': EmojiRecord('\U0001f9d9\U0001f3fd', 'mage: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fe': EmojiRecord('\U0001f9d9\U0001f3fe', 'mage: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3ff': EmojiRecord('\U0001f9d9\U0001f3ff', 'mage: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d9\u200d\u2642\ufe0f', 'man mage', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\u200d\u2642': EmojiRecord('\U0001f9d9\u200d\u2642', 'man mage', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fb\u200d\u2642\ufe0f', 'man mage: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9d9\U0001f3fb\u200d\u2642', 'man mage: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fc\u200d\u2642\ufe0f', 'man mage: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9d9\U0001f3fc\u200d\u2642', 'man mage: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fd\u200d\u2642\ufe0f', 'man mage: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9d9\U0001f3fd\u200d\u2642', 'man mage: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fe\u200d\u2642\ufe0f', 'man mage: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9d9\U0001f3fe\u200d\u2642', 'man mage: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d9\U0001f3ff\u200d\u2642\ufe0f', 'man mage: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9d9\U0001f3ff\u200d\u2642', 'man mage: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d9\u200d\u2640\ufe0f', 'woman mage', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\u200d\u2640': EmojiRecord('\U0001f9d9\u200d\u2640', 'woman mage', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fb\u200d\u2640\ufe0f', 'woman mage: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9d9\U0001f3fb\u200d\u2640', 'woman mage: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fc\u200d\u2640\ufe0f', 'woman mage: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9d9\U0001f3fc\u200d\u2640', 'woman mage: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fd\u200d\u2640\ufe0f', 'woman mage: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9d9\U0001f3fd\u200d\u2640', 'woman mage: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d9\U0001f3fe\u200d\u2640\ufe0f', 'woman mage: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9d9\U0001f3fe\u200d\u2640', 'woman mage: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d9\U0001f3ff\u200d\u2640\ufe0f', 'woman mage: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9d9\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9d9\U0001f3ff\u200d\u2640', 'woman mage: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d9\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da': EmojiRecord('\U0001f9da', 'fairy', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fb': EmojiRecord('\U0001f9da\U0001f3fb', 'fairy: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fc': EmojiRecord('\U0001f9da\U0001f3fc', 'fairy: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fd': EmojiRecord('\U0001f9da\U0001f3fd', 'fairy: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fe': EmojiRecord('\U0001f9da\U0001f3fe', 'fairy: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3ff': EmojiRecord('\U0001f9da\U0001f3ff', 'fairy: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9da\u200d\u2642\ufe0f': EmojiRecord('\U0001f9da\u200d\u2642\ufe0f', 'man fairy', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\u200d\u2642': EmojiRecord('\U0001f9da\u200d\u2642', 'man fairy', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9da\U0001f3fb\u200d\u2642\ufe0f', 'man fairy: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9da\U0001f3fb\u200d\u2642', 'man fairy: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9da\U0001f3fc\u200d\u2642\ufe0f', 'man fairy: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9da\U0001f3fc\u200d\u2642', 'man fairy: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9da\U0001f3fd\u200d\u2642\ufe0f', 'man fairy: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9da\U0001f3fd\u200d\u2642', 'man fairy: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9da\U0001f3fe\u200d\u2642\ufe0f', 'man fairy: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9da\U0001f3fe\u200d\u2642', 'man fairy: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9da\U0001f3ff\u200d\u2642\ufe0f', 'man fairy: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9da\U0001f3ff\u200d\u2642', 'man fairy: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\u200d\u2640\ufe0f': EmojiRecord('\U0001f9da\u200d\u2640\ufe0f', 'woman fairy', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\u200d\u2640': EmojiRecord('\U0001f9da\u200d\u2640', 'woman fairy', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9da\U0001f3fb\u200d\u2640\ufe0f', 'woman fairy: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9da\U0001f3fb\u200d\u2640', 'woman fairy: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9da\U0001f3fc\u200d\u2640\ufe0f', 'woman fairy: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9da\U0001f3fc\u200d\u2640', 'woman fairy: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9da\U0001f3fd\u200d\u2640\ufe0f', 'woman fairy: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9da\U0001f3fd\u200d\u2640', 'woman fairy: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9da\U0001f3fe\u200d\u2640\ufe0f', 'woman fairy: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9da\U0001f3fe\u200d\u2640', 'woman fairy: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9da\U0001f3ff\u200d\u2640\ufe0f', 'woman fairy: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9da\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9da\U0001f3ff\u200d\u2640', 'woman fairy: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9da\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db': EmojiRecord('\U0001f9db', 'vampire', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fb': EmojiRecord('\U0001f9db\U0001f3fb', 'vampire: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fc': EmojiRecord('\U0001f9db\U0001f3fc', 'vampire: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fd': EmojiRecord('\U0001f9db\U0001f3fd', 'vampire: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fe': EmojiRecord('\U0001f9db\U0001f3fe', 'vampire: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3ff': EmojiRecord('\U0001f9db\U0001f3ff', 'vampire: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9db\u200d\u2642\ufe0f': EmojiRecord('\U0001f9db\u200d\u2642\ufe0f', 'man vampire', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\u200d\u2642': EmojiRecord('\U0001f9db\u200d\u2642', 'man vampire', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9db\U0001f3fb\u200d\u2642\ufe0f', 'man vampire: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9db\U0001f3fb\u200d\u2642', 'man vampire: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9db\U0001f3fc\u200d\u2642\ufe0f', 'man vampire: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9db\U0001f3fc\u200d\u2642', 'man vampire: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9db\U0001f3fd\u200d\u2642\ufe0f', 'man vampire: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9db\U0001f3fd\u200d\u2642', 'man vampire: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9db\U0001f3fe\u200d\u2642\ufe0f', 'man vampire: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9db\U0001f3fe\u200d\u2642', 'man vampire: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9db\U0001f3ff\u200d\u2642\ufe0f', 'man vampire: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9db\U0001f3ff\u200d\u2642', 'man vampire: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\u200d\u2640\ufe0f': EmojiRecord('\U0001f9db\u200d\u2640\ufe0f', 'woman vampire', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\u200d\u2640': EmojiRecord('\U0001f9db\u200d\u2640', 'woman vampire', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9db\U0001f3fb\u200d\u2640\ufe0f', 'woman vampire: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9db\U0001f3fb\u200d\u2640', 'woman vampire: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9db\U0001f3fc\u200d\u2640\ufe0f', 'woman vampire: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9db\U0001f3fc\u200d\u2640', 'woman vampire: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9db\U0001f3fd\u200d\u2640\ufe0f', 'woman vampire: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9db\U0001f3fd\u200d\u2640', 'woman vampire: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9db\U0001f3fe\u200d\u2640\ufe0f', 'woman vampire: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9db\U0001f3fe\u200d\u2640', 'woman vampire: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9db\U0001f3ff\u200d\u2640\ufe0f', 'woman vampire: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9db\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9db\U0001f3ff\u200d\u2640', 'woman vampire: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9db\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc': EmojiRecord('\U0001f9dc', 'merperson', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fb': EmojiRecord('\U0001f9dc\U0001f3fb', 'merperson: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fc': EmojiRecord('\U0001f9dc\U0001f3fc', 'merperson: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fd': EmojiRecord('\U0001f9dc\U0001f3fd', 'merperson: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fe': EmojiRecord('\U0001f9dc\U0001f3fe', 'merperson: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3ff': EmojiRecord('\U0001f9dc\U0001f3ff', 'merperson: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dc\u200d\u2642\ufe0f', 'merman', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\u200d\u2642': EmojiRecord('\U0001f9dc\u200d\u2642', 'merman', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fb\u200d\u2642\ufe0f', 'merman: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9dc\U0001f3fb\u200d\u2642', 'merman: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fc\u200d\u2642\ufe0f', 'merman: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9dc\U0001f3fc\u200d\u2642', 'merman: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fd\u200d\u2642\ufe0f', 'merman: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9dc\U0001f3fd\u200d\u2642', 'merman: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fe\u200d\u2642\ufe0f', 'merman: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9dc\U0001f3fe\u200d\u2642', 'merman: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dc\U0001f3ff\u200d\u2642\ufe0f', 'merman: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9dc\U0001f3ff\u200d\u2642', 'merman: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dc\u200d\u2640\ufe0f', 'mermaid', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\u200d\u2640': EmojiRecord('\U0001f9dc\u200d\u2640', 'mermaid', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fb\u200d\u2640\ufe0f', 'mermaid: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9dc\U0001f3fb\u200d\u2640', 'mermaid: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fc\u200d\u2640\ufe0f', 'mermaid: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9dc\U0001f3fc\u200d\u2640', 'mermaid: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fd\u200d\u2640\ufe0f', 'mermaid: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9dc\U0001f3fd\u200d\u2640', 'mermaid: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dc\U0001f3fe\u200d\u2640\ufe0f', 'mermaid: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9dc\U0001f3fe\u200d\u2640', 'mermaid: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dc\U0001f3ff\u200d\u2640\ufe0f', 'mermaid: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dc\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9dc\U0001f3ff\u200d\u2640', 'mermaid: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dc\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd': EmojiRecord('\U0001f9dd', 'elf', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fb': EmojiRecord('\U0001f9dd\U0001f3fb', 'elf: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fb', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fc': EmojiRecord('\U0001f9dd\U0001f3fc', 'elf: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fc', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fd': EmojiRecord('\U0001f9dd\U0001f3fd', 'elf: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fd', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fe': EmojiRecord('\U0001f9dd\U0001f3fe', 'elf: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fe', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3ff': EmojiRecord('\U0001f9dd\U0001f3ff', 'elf: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3ff', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dd\u200d\u2642\ufe0f', 'man elf', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\u200d\u2642': EmojiRecord('\U0001f9dd\u200d\u2642', 'man elf', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fb\u200d\u2642\ufe0f', 'man elf: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9dd\U0001f3fb\u200d\u2642', 'man elf: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fc\u200d\u2642\ufe0f', 'man elf: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9dd\U0001f3fc\u200d\u2642', 'man elf: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fd\u200d\u2642\ufe0f', 'man elf: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9dd\U0001f3fd\u200d\u2642', 'man elf: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fe\u200d\u2642\ufe0f', 'man elf: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9dd\U0001f3fe\u200d\u2642', 'man elf: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9dd\U0001f3ff\u200d\u2642\ufe0f', 'man elf: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9dd\U0001f3ff\u200d\u2642', 'man elf: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dd\u200d\u2640\ufe0f', 'woman elf', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\u200d\u2640': EmojiRecord('\U0001f9dd\u200d\u2640', 'woman elf', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fb\u200d\u2640\ufe0f', 'woman elf: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9dd\U0001f3fb\u200d\u2640', 'woman elf: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fc\u200d\u2640\ufe0f', 'woman elf: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9dd\U0001f3fc\u200d\u2640', 'woman elf: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fd\u200d\u2640\ufe0f', 'woman elf: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9dd\U0001f3fd\u200d\u2640', 'woman elf: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dd\U0001f3fe\u200d\u2640\ufe0f', 'woman elf: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9dd\U0001f3fe\u200d\u2640', 'woman elf: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9dd\U0001f3ff\u200d\u2640\ufe0f', 'woman elf: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9dd\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9dd\U0001f3ff\u200d\u2640', 'woman elf: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9dd\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9de': EmojiRecord('\U0001f9de', 'genie', Status.FULLY_QUALIFIED, '5.0', '\U0001f9de', 'People & Body', 'person-fantasy'),
    '\U0001f9de\u200d\u2642\ufe0f': EmojiRecord('\U0001f9de\u200d\u2642\ufe0f', 'man genie', Status.FULLY_QUALIFIED, '5.0', '\U0001f9de\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9de\u200d\u2642': EmojiRecord('\U0001f9de\u200d\u2642', 'man genie', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9de\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9de\u200d\u2640\ufe0f': EmojiRecord('\U0001f9de\u200d\u2640\ufe0f', 'woman genie', Status.FULLY_QUALIFIED, '5.0', '\U0001f9de\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9de\u200d\u2640': EmojiRecord('\U0001f9de\u200d\u2640', 'woman genie', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9de\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9df': EmojiRecord('\U0001f9df', 'zombie', Status.FULLY_QUALIFIED, '5.0', '\U0001f9df', 'People & Body', 'person-fantasy'),
    '\U0001f9df\u200d\u2642\ufe0f': EmojiRecord('\U0001f9df\u200d\u2642\ufe0f', 'man zombie', Status.FULLY_QUALIFIED, '5.0', '\U0001f9df\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9df\u200d\u2642': EmojiRecord('\U0001f9df\u200d\u2642', 'man zombie', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9df\u200d\u2642\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9df\u200d\u2640\ufe0f': EmojiRecord('\U0001f9df\u200d\u2640\ufe0f', 'woman zombie', Status.FULLY_QUALIFIED, '5.0', '\U0001f9df\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9df\u200d\u2640': EmojiRecord('\U0001f9df\u200d\u2640', 'woman zombie', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9df\u200d\u2640\ufe0f', 'People & Body', 'person-fantasy'),
    '\U0001f9cc': EmojiRecord('\U0001f9cc', 'troll', Status.FULLY_QUALIFIED, '14.0', '\U0001f9cc', 'People & Body', 'person-fantasy'),
    '\U0001f486': EmojiRecord('\U0001f486', 'person getting massage', Status.FULLY_QUALIFIED, '0.6', '\U0001f486', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fb': EmojiRecord('\U0001f486\U0001f3fb', 'person getting massage: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f486\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fc': EmojiRecord('\U0001f486\U0001f3fc', 'person getting massage: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f486\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fd': EmojiRecord('\U0001f486\U0001f3fd', 'person getting massage: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f486\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fe': EmojiRecord('\U0001f486\U0001f3fe', 'person getting massage: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f486\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3ff': EmojiRecord('\U0001f486\U0001f3ff', 'person getting massage: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f486\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f486\u200d\u2642\ufe0f': EmojiRecord('\U0001f486\u200d\u2642\ufe0f', 'man getting massage', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\u200d\u2642': EmojiRecord('\U0001f486\u200d\u2642', 'man getting massage', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f486\U0001f3fb\u200d\u2642\ufe0f', 'man getting massage: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f486\U0001f3fb\u200d\u2642', 'man getting massage: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f486\U0001f3fc\u200d\u2642\ufe0f', 'man getting massage: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f486\U0001f3fc\u200d\u2642', 'man getting massage: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f486\U0001f3fd\u200d\u2642\ufe0f', 'man getting massage: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f486\U0001f3fd\u200d\u2642', 'man getting massage: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f486\U0001f3fe\u200d\u2642\ufe0f', 'man getting massage: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f486\U0001f3fe\u200d\u2642', 'man getting massage: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f486\U0001f3ff\u200d\u2642\ufe0f', 'man getting massage: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f486\U0001f3ff\u200d\u2642', 'man getting massage: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\u200d\u2640\ufe0f': EmojiRecord('\U0001f486\u200d\u2640\ufe0f', 'woman getting massage', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\u200d\u2640': EmojiRecord('\U0001f486\u200d\u2640', 'woman getting massage', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f486\U0001f3fb\u200d\u2640\ufe0f', 'woman getting massage: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f486\U0001f3fb\u200d\u2640', 'woman getting massage: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f486\U0001f3fc\u200d\u2640\ufe0f', 'woman getting massage: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f486\U0001f3fc\u200d\u2640', 'woman getting massage: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f486\U0001f3fd\u200d\u2640\ufe0f', 'woman getting massage: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f486\U0001f3fd\u200d\u2640', 'woman getting massage: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f486\U0001f3fe\u200d\u2640\ufe0f', 'woman getting massage: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f486\U0001f3fe\u200d\u2640', 'woman getting massage: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f486\U0001f3ff\u200d\u2640\ufe0f', 'woman getting massage: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f486\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f486\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f486\U0001f3ff\u200d\u2640', 'woman getting massage: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f486\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487': EmojiRecord('\U0001f487', 'person getting haircut', Status.FULLY_QUALIFIED, '0.6', '\U0001f487', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fb': EmojiRecord('\U0001f487\U0001f3fb', 'person getting haircut: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f487\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fc': EmojiRecord('\U0001f487\U0001f3fc', 'person getting haircut: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f487\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fd': EmojiRecord('\U0001f487\U0001f3fd', 'person getting haircut: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f487\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fe': EmojiRecord('\U0001f487\U0001f3fe', 'person getting haircut: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f487\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3ff': EmojiRecord('\U0001f487\U0001f3ff', 'person getting haircut: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f487\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f487\u200d\u2642\ufe0f': EmojiRecord('\U0001f487\u200d\u2642\ufe0f', 'man getting haircut', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\u200d\u2642': EmojiRecord('\U0001f487\u200d\u2642', 'man getting haircut', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f487\U0001f3fb\u200d\u2642\ufe0f', 'man getting haircut: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f487\U0001f3fb\u200d\u2642', 'man getting haircut: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f487\U0001f3fc\u200d\u2642\ufe0f', 'man getting haircut: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f487\U0001f3fc\u200d\u2642', 'man getting haircut: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f487\U0001f3fd\u200d\u2642\ufe0f', 'man getting haircut: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f487\U0001f3fd\u200d\u2642', 'man getting haircut: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f487\U0001f3fe\u200d\u2642\ufe0f', 'man getting haircut: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f487\U0001f3fe\u200d\u2642', 'man getting haircut: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f487\U0001f3ff\u200d\u2642\ufe0f', 'man getting haircut: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f487\U0001f3ff\u200d\u2642', 'man getting haircut: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\u200d\u2640\ufe0f': EmojiRecord('\U0001f487\u200d\u2640\ufe0f', 'woman getting haircut', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\u200d\u2640': EmojiRecord('\U0001f487\u200d\u2640', 'woman getting haircut', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f487\U0001f3fb\u200d\u2640\ufe0f', 'woman getting haircut: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f487\U0001f3fb\u200d\u2640', 'woman getting haircut: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f487\U0001f3fc\u200d\u2640\ufe0f', 'woman getting haircut: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f487\U0001f3fc\u200d\u2640', 'woman getting haircut: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f487\U0001f3fd\u200d\u2640\ufe0f', 'woman getting haircut: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f487\U0001f3fd\u200d\u2640', 'woman getting haircut: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f487\U0001f3fe\u200d\u2640\ufe0f', 'woman getting haircut: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f487\U0001f3fe\u200d\u2640', 'woman getting haircut: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f487\U0001f3ff\u200d\u2640\ufe0f', 'woman getting haircut: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f487\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f487\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f487\U0001f3ff\u200d\u2640', 'woman getting haircut: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f487\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6': EmojiRecord('\U0001f6b6', 'person walking', Status.FULLY_QUALIFIED, '0.6', '\U0001f6b6', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb': EmojiRecord('\U0001f6b6\U0001f3fb', 'person walking: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b6\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc': EmojiRecord('\U0001f6b6\U0001f3fc', 'person walking: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b6\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd': EmojiRecord('\U0001f6b6\U0001f3fd', 'person walking: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b6\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe': EmojiRecord('\U0001f6b6\U0001f3fe', 'person walking: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b6\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff': EmojiRecord('\U0001f6b6\U0001f3ff', 'person walking: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b6\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b6\u200d\u2642\ufe0f', 'man walking', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2642': EmojiRecord('\U0001f6b6\u200d\u2642', 'man walking', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f', 'man walking: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2642', 'man walking: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f', 'man walking: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2642', 'man walking: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f', 'man walking: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2642', 'man walking: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f', 'man walking: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2642', 'man walking: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f', 'man walking: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2642', 'man walking: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b6\u200d\u2640\ufe0f', 'woman walking', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2640': EmojiRecord('\U0001f6b6\u200d\u2640', 'woman walking', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f', 'woman walking: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2640', 'woman walking: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f', 'woman walking: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2640', 'woman walking: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f', 'woman walking: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2640', 'woman walking: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f', 'woman walking: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2640', 'woman walking: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f', 'woman walking: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2640', 'woman walking: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\u200d\u27a1\ufe0f', 'person walking facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u27a1': EmojiRecord('\U0001f6b6\u200d\u27a1', 'person walking facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u27a1\ufe0f', 'person walking facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u27a1', 'person walking facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u27a1\ufe0f', 'person walking facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u27a1', 'person walking facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u27a1\ufe0f', 'person walking facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u27a1', 'person walking facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u27a1\ufe0f', 'person walking facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u27a1', 'person walking facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u27a1\ufe0f', 'person walking facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u27a1', 'person walking facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman walking facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\u200d\u2640\u200d\u27a1\ufe0f', 'woman walking facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1', 'woman walking facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f6b6\u200d\u2640\u200d\u27a1', 'woman walking facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman walking facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2640\u200d\u27a1\ufe0f', 'woman walking facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1', 'woman walking facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2640\u200d\u27a1', 'woman walking facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman walking facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2640\u200d\u27a1\ufe0f', 'woman walking facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1', 'woman walking facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2640\u200d\u27a1', 'woman walking facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman walking facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2640\u200d\u27a1\ufe0f', 'woman walking facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1', 'woman walking facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2640\u200d\u27a1', 'woman walking facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman walking facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2640\u200d\u27a1\ufe0f', 'woman walking facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1', 'woman walking facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2640\u200d\u27a1', 'woman walking facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman walking facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2640\u200d\u27a1\ufe0f', 'woman walking facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1', 'woman walking facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2640\u200d\u27a1', 'woman walking facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man walking facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\u200d\u2642\u200d\u27a1\ufe0f', 'man walking facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1', 'man walking facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f6b6\u200d\u2642\u200d\u27a1', 'man walking facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man walking facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2642\u200d\u27a1\ufe0f', 'man walking facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1', 'man walking facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fb\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fb\u200d\u2642\u200d\u27a1', 'man walking facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man walking facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2642\u200d\u27a1\ufe0f', 'man walking facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1', 'man walking facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fc\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fc\u200d\u2642\u200d\u27a1', 'man walking facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man walking facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2642\u200d\u27a1\ufe0f', 'man walking facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1', 'man walking facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fd\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fd\u200d\u2642\u200d\u27a1', 'man walking facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man walking facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2642\u200d\u27a1\ufe0f', 'man walking facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1', 'man walking facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3fe\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3fe\u200d\u2642\u200d\u27a1', 'man walking facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man walking facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2642\u200d\u27a1\ufe0f', 'man walking facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1', 'man walking facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f6b6\U0001f3ff\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f6b6\U0001f3ff\u200d\u2642\u200d\u27a1', 'man walking facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd': EmojiRecord('\U0001f9cd', 'person standing', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fb': EmojiRecord('\U0001f9cd\U0001f3fb', 'person standing: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fc': EmojiRecord('\U0001f9cd\U0001f3fc', 'person standing: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fd': EmojiRecord('\U0001f9cd\U0001f3fd', 'person standing: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fe': EmojiRecord('\U0001f9cd\U0001f3fe', 'person standing: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3ff': EmojiRecord('\U0001f9cd\U0001f3ff', 'person standing: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f9cd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cd\u200d\u2642\ufe0f', 'man standing', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\u200d\u2642': EmojiRecord('\U0001f9cd\u200d\u2642', 'man standing', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fb\u200d\u2642\ufe0f', 'man standing: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9cd\U0001f3fb\u200d\u2642', 'man standing: light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fc\u200d\u2642\ufe0f', 'man standing: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9cd\U0001f3fc\u200d\u2642', 'man standing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fd\u200d\u2642\ufe0f', 'man standing: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9cd\U0001f3fd\u200d\u2642', 'man standing: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fe\u200d\u2642\ufe0f', 'man standing: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9cd\U0001f3fe\u200d\u2642', 'man standing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9cd\U0001f3ff\u200d\u2642\ufe0f', 'man standing: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9cd\U0001f3ff\u200d\u2642', 'man standing: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cd\u200d\u2640\ufe0f', 'woman standing', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\u200d\u2640': EmojiRecord('\U0001f9cd\u200d\u2640', 'woman standing', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fb\u200d\u2640\ufe0f', 'woman standing: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9cd\U0001f3fb\u200d\u2640', 'woman standing: light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fc\u200d\u2640\ufe0f', 'woman standing: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9cd\U0001f3fc\u200d\u2640', 'woman standing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fd\u200d\u2640\ufe0f', 'woman standing: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9cd\U0001f3fd\u200d\u2640', 'woman standing: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cd\U0001f3fe\u200d\u2640\ufe0f', 'woman standing: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9cd\U0001f3fe\u200d\u2640', 'woman standing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9cd\U0001f3ff\u200d\u2640\ufe0f', 'woman standing: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9cd\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9cd\U0001f3ff\u200d\u2640', 'woman standing: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9cd\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce': EmojiRecord('\U0001f9ce', 'person kneeling', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb': EmojiRecord('\U0001f9ce\U0001f3fb', 'person kneeling: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc': EmojiRecord('\U0001f9ce\U0001f3fc', 'person kneeling: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd': EmojiRecord('\U0001f9ce\U0001f3fd', 'person kneeling: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe': EmojiRecord('\U0001f9ce\U0001f3fe', 'person kneeling: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff': EmojiRecord('\U0001f9ce\U0001f3ff', 'person kneeling: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2642\ufe0f': EmojiRecord('\U0001f9ce\u200d\u2642\ufe0f', 'man kneeling', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2642': EmojiRecord('\U0001f9ce\u200d\u2642', 'man kneeling', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f', 'man kneeling: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2642', 'man kneeling: light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f', 'man kneeling: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2642', 'man kneeling: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f', 'man kneeling: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2642', 'man kneeling: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f', 'man kneeling: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2642', 'man kneeling: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f', 'man kneeling: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2642', 'man kneeling: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2640\ufe0f': EmojiRecord('\U0001f9ce\u200d\u2640\ufe0f', 'woman kneeling', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2640': EmojiRecord('\U0001f9ce\u200d\u2640', 'woman kneeling', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f', 'woman kneeling: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2640', 'woman kneeling: light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f', 'woman kneeling: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2640', 'woman kneeling: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f', 'woman kneeling: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2640', 'woman kneeling: medium skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f', 'woman kneeling: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2640', 'woman kneeling: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f', 'woman kneeling: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2640', 'woman kneeling: dark skin tone', Status.MINIMALLY_QUALIFIED, '12.0', '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\u200d\u27a1\ufe0f', 'person kneeling facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u27a1': EmojiRecord('\U0001f9ce\u200d\u27a1', 'person kneeling facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u27a1\ufe0f', 'person kneeling facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u27a1', 'person kneeling facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u27a1\ufe0f', 'person kneeling facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u27a1', 'person kneeling facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u27a1\ufe0f', 'person kneeling facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u27a1', 'person kneeling facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u27a1\ufe0f', 'person kneeling facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u27a1', 'person kneeling facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u27a1\ufe0f', 'person kneeling facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u27a1', 'person kneeling facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman kneeling facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\u200d\u2640\u200d\u27a1\ufe0f', 'woman kneeling facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1', 'woman kneeling facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f9ce\u200d\u2640\u200d\u27a1', 'woman kneeling facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman kneeling facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2640\u200d\u27a1\ufe0f', 'woman kneeling facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1', 'woman kneeling facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2640\u200d\u27a1', 'woman kneeling facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman kneeling facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2640\u200d\u27a1\ufe0f', 'woman kneeling facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1', 'woman kneeling facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2640\u200d\u27a1', 'woman kneeling facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman kneeling facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2640\u200d\u27a1\ufe0f', 'woman kneeling facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1', 'woman kneeling facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2640\u200d\u27a1', 'woman kneeling facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman kneeling facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2640\u200d\u27a1\ufe0f', 'woman kneeling facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1', 'woman kneeling facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2640\u200d\u27a1', 'woman kneeling facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman kneeling facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2640\u200d\u27a1\ufe0f', 'woman kneeling facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1', 'woman kneeling facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2640\u200d\u27a1', 'woman kneeling facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man kneeling facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\u200d\u2642\u200d\u27a1\ufe0f', 'man kneeling facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1', 'man kneeling facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f9ce\u200d\u2642\u200d\u27a1', 'man kneeling facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man kneeling facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2642\u200d\u27a1\ufe0f', 'man kneeling facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1', 'man kneeling facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fb\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fb\u200d\u2642\u200d\u27a1', 'man kneeling facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man kneeling facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2642\u200d\u27a1\ufe0f', 'man kneeling facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1', 'man kneeling facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fc\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fc\u200d\u2642\u200d\u27a1', 'man kneeling facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man kneeling facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2642\u200d\u27a1\ufe0f', 'man kneeling facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1', 'man kneeling facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fd\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fd\u200d\u2642\u200d\u27a1', 'man kneeling facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man kneeling facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2642\u200d\u27a1\ufe0f', 'man kneeling facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1', 'man kneeling facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3fe\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3fe\u200d\u2642\u200d\u27a1', 'man kneeling facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man kneeling facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2642\u200d\u27a1\ufe0f', 'man kneeling facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1', 'man kneeling facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9ce\U0001f3ff\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f9ce\U0001f3ff\u200d\u2642\u200d\u27a1', 'man kneeling facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9af': EmojiRecord('\U0001f9d1\u200d\U0001f9af', 'person with white cane', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9af': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9af', 'person with white cane: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9af': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9af', 'person with white cane: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9af': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9af', 'person with white cane: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9af': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9af', 'person with white cane: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9af': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9af', 'person with white cane: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\u200d\U0001f9af\u200d\u27a1\ufe0f', 'person with white cane facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f9d1\u200d\U0001f9af\u200d\u27a1', 'person with white cane facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'person with white cane facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9af\u200d\u27a1', 'person with white cane facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'person with white cane facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9af\u200d\u27a1', 'person with white cane facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'person with white cane facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9af\u200d\u27a1', 'person with white cane facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'person with white cane facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9af\u200d\u27a1', 'person with white cane facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'person with white cane facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9af\u200d\u27a1', 'person with white cane facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9af': EmojiRecord('\U0001f468\u200d\U0001f9af', 'man with white cane', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9af': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9af', 'man with white cane: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fb\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9af': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9af', 'man with white cane: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fc\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9af': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9af', 'man with white cane: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fd\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9af': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9af', 'man with white cane: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fe\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9af': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9af', 'man with white cane: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3ff\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\u200d\U0001f9af\u200d\u27a1\ufe0f', 'man with white cane facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f468\u200d\U0001f9af\u200d\u27a1', 'man with white cane facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'man with white cane facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9af\u200d\u27a1', 'man with white cane facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'man with white cane facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9af\u200d\u27a1', 'man with white cane facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'man with white cane facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9af\u200d\u27a1', 'man with white cane facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'man with white cane facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9af\u200d\u27a1', 'man with white cane facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'man with white cane facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9af\u200d\u27a1', 'man with white cane facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9af': EmojiRecord('\U0001f469\u200d\U0001f9af', 'woman with white cane', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9af': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9af', 'woman with white cane: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fb\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9af': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9af', 'woman with white cane: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9af': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9af', 'woman with white cane: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9af': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9af', 'woman with white cane: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9af': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9af', 'woman with white cane: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f9af', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\u200d\U0001f9af\u200d\u27a1\ufe0f', 'woman with white cane facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f469\u200d\U0001f9af\u200d\u27a1', 'woman with white cane facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'woman with white cane facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9af\u200d\u27a1', 'woman with white cane facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'woman with white cane facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9af\u200d\u27a1', 'woman with white cane facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'woman with white cane facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9af\u200d\u27a1', 'woman with white cane facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'woman with white cane facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9af\u200d\u27a1', 'woman with white cane facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'woman with white cane facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9af\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9af\u200d\u27a1', 'woman with white cane facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9bc': EmojiRecord('\U0001f9d1\u200d\U0001f9bc', 'person in motorized wheelchair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9bc': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9bc', 'person in motorized wheelchair: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9bc': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9bc', 'person in motorized wheelchair: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9bc': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9bc', 'person in motorized wheelchair: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9bc': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9bc', 'person in motorized wheelchair: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9bc': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9bc', 'person in motorized wheelchair: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'person in motorized wheelchair facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f9d1\u200d\U0001f9bc\u200d\u27a1', 'person in motorized wheelchair facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'person in motorized wheelchair facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9bc\u200d\u27a1', 'person in motorized wheelchair facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'person in motorized wheelchair facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9bc\u200d\u27a1', 'person in motorized wheelchair facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'person in motorized wheelchair facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9bc\u200d\u27a1', 'person in motorized wheelchair facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'person in motorized wheelchair facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9bc\u200d\u27a1', 'person in motorized wheelchair facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'person in motorized wheelchair facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9bc\u200d\u27a1', 'person in motorized wheelchair facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9bc': EmojiRecord('\U0001f468\u200d\U0001f9bc', 'man in motorized wheelchair', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9bc': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9bc', 'man in motorized wheelchair: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fb\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9bc': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9bc', 'man in motorized wheelchair: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fc\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9bc': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9bc', 'man in motorized wheelchair: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fd\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9bc': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9bc', 'man in motorized wheelchair: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fe\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9bc': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9bc', 'man in motorized wheelchair: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3ff\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'man in motorized wheelchair facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f468\u200d\U0001f9bc\u200d\u27a1', 'man in motorized wheelchair facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'man in motorized wheelchair facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9bc\u200d\u27a1', 'man in motorized wheelchair facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'man in motorized wheelchair facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9bc\u200d\u27a1', 'man in motorized wheelchair facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'man in motorized wheelchair facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9bc\u200d\u27a1', 'man in motorized wheelchair facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'man in motorized wheelchair facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9bc\u200d\u27a1', 'man in motorized wheelchair facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'man in motorized wheelchair facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9bc\u200d\u27a1', 'man in motorized wheelchair facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9bc': EmojiRecord('\U0001f469\u200d\U0001f9bc', 'woman in motorized wheelchair', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9bc': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9bc', 'woman in motorized wheelchair: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fb\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9bc': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9bc', 'woman in motorized wheelchair: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9bc': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9bc', 'woman in motorized wheelchair: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9bc': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9bc', 'woman in motorized wheelchair: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9bc': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9bc', 'woman in motorized wheelchair: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f9bc', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'woman in motorized wheelchair facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f469\u200d\U0001f9bc\u200d\u27a1', 'woman in motorized wheelchair facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'woman in motorized wheelchair facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9bc\u200d\u27a1', 'woman in motorized wheelchair facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'woman in motorized wheelchair facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9bc\u200d\u27a1', 'woman in motorized wheelchair facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'woman in motorized wheelchair facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9bc\u200d\u27a1', 'woman in motorized wheelchair facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'woman in motorized wheelchair facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9bc\u200d\u27a1', 'woman in motorized wheelchair facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'woman in motorized wheelchair facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9bc\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9bc\u200d\u27a1', 'woman in motorized wheelchair facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9bd': EmojiRecord('\U0001f9d1\u200d\U0001f9bd', 'person in manual wheelchair', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9bd': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9bd', 'person in manual wheelchair: light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9bd': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9bd', 'person in manual wheelchair: medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9bd': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9bd', 'person in manual wheelchair: medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9bd': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9bd', 'person in manual wheelchair: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9bd': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9bd', 'person in manual wheelchair: dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'person in manual wheelchair facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f9d1\u200d\U0001f9bd\u200d\u27a1', 'person in manual wheelchair facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'person in manual wheelchair facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f9bd\u200d\u27a1', 'person in manual wheelchair facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'person in manual wheelchair facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f9bd\u200d\u27a1', 'person in manual wheelchair facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'person in manual wheelchair facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f9bd\u200d\u27a1', 'person in manual wheelchair facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'person in manual wheelchair facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f9bd\u200d\u27a1', 'person in manual wheelchair facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'person in manual wheelchair facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f9bd\u200d\u27a1', 'person in manual wheelchair facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f9d1\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9bd': EmojiRecord('\U0001f468\u200d\U0001f9bd', 'man in manual wheelchair', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9bd': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9bd', 'man in manual wheelchair: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fb\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9bd': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9bd', 'man in manual wheelchair: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fc\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9bd': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9bd', 'man in manual wheelchair: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fd\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9bd': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9bd', 'man in manual wheelchair: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fe\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9bd': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9bd', 'man in manual wheelchair: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3ff\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'man in manual wheelchair facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f468\u200d\U0001f9bd\u200d\u27a1', 'man in manual wheelchair facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'man in manual wheelchair facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fb\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f9bd\u200d\u27a1', 'man in manual wheelchair facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'man in manual wheelchair facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fc\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f9bd\u200d\u27a1', 'man in manual wheelchair facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'man in manual wheelchair facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fd\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f9bd\u200d\u27a1', 'man in manual wheelchair facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'man in manual wheelchair facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3fe\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f9bd\u200d\u27a1', 'man in manual wheelchair facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'man in manual wheelchair facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f468\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f468\U0001f3ff\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f9bd\u200d\u27a1', 'man in manual wheelchair facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f468\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9bd': EmojiRecord('\U0001f469\u200d\U0001f9bd', 'woman in manual wheelchair', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9bd': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9bd', 'woman in manual wheelchair: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fb\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9bd': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9bd', 'woman in manual wheelchair: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9bd': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9bd', 'woman in manual wheelchair: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9bd': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9bd', 'woman in manual wheelchair: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9bd': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9bd', 'woman in manual wheelchair: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f9bd', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'woman in manual wheelchair facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f469\u200d\U0001f9bd\u200d\u27a1', 'woman in manual wheelchair facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'woman in manual wheelchair facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fb\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f9bd\u200d\u27a1', 'woman in manual wheelchair facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'woman in manual wheelchair facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fc\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f9bd\u200d\u27a1', 'woman in manual wheelchair facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'woman in manual wheelchair facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fd\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f9bd\u200d\u27a1', 'woman in manual wheelchair facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'woman in manual wheelchair facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3fe\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f9bd\u200d\u27a1', 'woman in manual wheelchair facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'woman in manual wheelchair facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f469\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f469\U0001f3ff\u200d\U0001f9bd\u200d\u27a1': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f9bd\u200d\u27a1', 'woman in manual wheelchair facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f469\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3': EmojiRecord('\U0001f3c3', 'person running', Status.FULLY_QUALIFIED, '0.6', '\U0001f3c3', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb': EmojiRecord('\U0001f3c3\U0001f3fb', 'person running: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c3\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc': EmojiRecord('\U0001f3c3\U0001f3fc', 'person running: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c3\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd': EmojiRecord('\U0001f3c3\U0001f3fd', 'person running: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c3\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe': EmojiRecord('\U0001f3c3\U0001f3fe', 'person running: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c3\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff': EmojiRecord('\U0001f3c3\U0001f3ff', 'person running: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c3\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c3\u200d\u2642\ufe0f', 'man running', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2642': EmojiRecord('\U0001f3c3\u200d\u2642', 'man running', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f', 'man running: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2642', 'man running: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f', 'man running: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2642', 'man running: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f', 'man running: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2642', 'man running: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f', 'man running: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2642', 'man running: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f', 'man running: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2642', 'man running: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c3\u200d\u2640\ufe0f', 'woman running', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2640': EmojiRecord('\U0001f3c3\u200d\u2640', 'woman running', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f', 'woman running: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2640', 'woman running: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f', 'woman running: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2640', 'woman running: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f', 'woman running: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2640', 'woman running: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f', 'woman running: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2640', 'woman running: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f', 'woman running: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2640', 'woman running: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\u200d\u27a1\ufe0f', 'person running facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u27a1': EmojiRecord('\U0001f3c3\u200d\u27a1', 'person running facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u27a1\ufe0f', 'person running facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u27a1', 'person running facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u27a1\ufe0f', 'person running facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u27a1', 'person running facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u27a1\ufe0f', 'person running facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u27a1', 'person running facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u27a1\ufe0f', 'person running facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u27a1', 'person running facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u27a1\ufe0f', 'person running facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u27a1', 'person running facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman running facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\u200d\u2640\u200d\u27a1\ufe0f', 'woman running facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1', 'woman running facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f3c3\u200d\u2640\u200d\u27a1', 'woman running facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman running facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2640\u200d\u27a1\ufe0f', 'woman running facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1', 'woman running facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2640\u200d\u27a1', 'woman running facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman running facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2640\u200d\u27a1\ufe0f', 'woman running facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1', 'woman running facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2640\u200d\u27a1', 'woman running facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman running facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2640\u200d\u27a1\ufe0f', 'woman running facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1', 'woman running facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2640\u200d\u27a1', 'woman running facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman running facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2640\u200d\u27a1\ufe0f', 'woman running facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1', 'woman running facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2640\u200d\u27a1', 'woman running facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'woman running facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2640\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2640\u200d\u27a1\ufe0f', 'woman running facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1', 'woman running facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2640\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2640\u200d\u27a1', 'woman running facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man running facing right', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\u200d\u2642\u200d\u27a1\ufe0f', 'man running facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1', 'man running facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f3c3\u200d\u2642\u200d\u27a1', 'man running facing right', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man running facing right: light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2642\u200d\u27a1\ufe0f', 'man running facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1', 'man running facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fb\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fb\u200d\u2642\u200d\u27a1', 'man running facing right: light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man running facing right: medium-light skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2642\u200d\u27a1\ufe0f', 'man running facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1', 'man running facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fc\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fc\u200d\u2642\u200d\u27a1', 'man running facing right: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man running facing right: medium skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2642\u200d\u27a1\ufe0f', 'man running facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1', 'man running facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fd\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fd\u200d\u2642\u200d\u27a1', 'man running facing right: medium skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man running facing right: medium-dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2642\u200d\u27a1\ufe0f', 'man running facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1', 'man running facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3fe\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3fe\u200d\u2642\u200d\u27a1', 'man running facing right: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'man running facing right: dark skin tone', Status.FULLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2642\u200d\u27a1\ufe0f': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2642\u200d\u27a1\ufe0f', 'man running facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1', 'man running facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f3c3\U0001f3ff\u200d\u2642\u200d\u27a1': EmojiRecord('\U0001f3c3\U0001f3ff\u200d\u2642\u200d\u27a1', 'man running facing right: dark skin tone', Status.MINIMALLY_QUALIFIED, '15.1', '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f483': EmojiRecord('\U0001f483', 'woman dancing', Status.FULLY_QUALIFIED, '0.6', '\U0001f483', 'People & Body', 'person-activity'),
    '\U0001f483\U0001f3fb': EmojiRecord('\U0001f483\U0001f3fb', 'woman dancing: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f483\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f483\U0001f3fc': EmojiRecord('\U0001f483\U0001f3fc', 'woman dancing: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f483\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f483\U0001f3fd': EmojiRecord('\U0001f483\U0001f3fd', 'woman dancing: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f483\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f483\U0001f3fe': EmojiRecord('\U0001f483\U0001f3fe', 'woman dancing: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f483\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f483\U0001f3ff': EmojiRecord('\U0001f483\U0001f3ff', 'woman dancing: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f483\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f57a': EmojiRecord('\U0001f57a', 'man dancing', Status.FULLY_QUALIFIED, '3.0', '\U0001f57a', 'People & Body', 'person-activity'),
    '\U0001f57a\U0001f3fb': EmojiRecord('\U0001f57a\U0001f3fb', 'man dancing: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f57a\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f57a\U0001f3fc': EmojiRecord('\U0001f57a\U0001f3fc', 'man dancing: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f57a\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f57a\U0001f3fd': EmojiRecord('\U0001f57a\U0001f3fd', 'man dancing: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f57a\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f57a\U0001f3fe': EmojiRecord('\U0001f57a\U0001f3fe', 'man dancing: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f57a\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f57a\U0001f3ff': EmojiRecord('\U0001f57a\U0001f3ff', 'man dancing: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f57a\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f574\ufe0f': EmojiRecord('\U0001f574\ufe0f', 'person in suit levitating', Status.FULLY_QUALIFIED, '0.7', '\U0001f574\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f574': EmojiRecord('\U0001f574', 'person in suit levitating', Status.UNQUALIFIED, '0.7', '\U0001f574\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f574\U0001f3fb': EmojiRecord('\U0001f574\U0001f3fb', 'person in suit levitating: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f574\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f574\U0001f3fc': EmojiRecord('\U0001f574\U0001f3fc', 'person in suit levitating: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f574\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f574\U0001f3fd': EmojiRecord('\U0001f574\U0001f3fd', 'person in suit levitating: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f574\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f574\U0001f3fe': EmojiRecord('\U0001f574\U0001f3fe', 'person in suit levitating: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f574\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f574\U0001f3ff': EmojiRecord('\U0001f574\U0001f3ff', 'person in suit levitating: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f574\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f46f': EmojiRecord('\U0001f46f', 'people with bunny ears', Status.FULLY_QUALIFIED, '0.6', '\U0001f46f', 'People & Body', 'person-activity'),
    '\U0001f46f\u200d\u2642\ufe0f': EmojiRecord('\U0001f46f\u200d\u2642\ufe0f', 'men with bunny ears', Status.FULLY_QUALIFIED, '4.0', '\U0001f46f\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f46f\u200d\u2642': EmojiRecord('\U0001f46f\u200d\u2642', 'men with bunny ears', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46f\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f46f\u200d\u2640\ufe0f': EmojiRecord('\U0001f46f\u200d\u2640\ufe0f', 'women with bunny ears', Status.FULLY_QUALIFIED, '4.0', '\U0001f46f\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f46f\u200d\u2640': EmojiRecord('\U0001f46f\u200d\u2640', 'women with bunny ears', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f46f\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6': EmojiRecord('\U0001f9d6', 'person in steamy room', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fb': EmojiRecord('\U0001f9d6\U0001f3fb', 'person in steamy room: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fc': EmojiRecord('\U0001f9d6\U0001f3fc', 'person in steamy room: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fd': EmojiRecord('\U0001f9d6\U0001f3fd', 'person in steamy room: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fe': EmojiRecord('\U0001f9d6\U0001f3fe', 'person in steamy room: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3ff': EmojiRecord('\U0001f9d6\U0001f3ff', 'person in steamy room: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f9d6\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d6\u200d\u2642\ufe0f', 'man in steamy room', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\u200d\u2642': EmojiRecord('\U0001f9d6\u200d\u2642', 'man in steamy room', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fb\u200d\u2642\ufe0f', 'man in steamy room: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9d6\U0001f3fb\u200d\u2642', 'man in steamy room: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fc\u200d\u2642\ufe0f', 'man in steamy room: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9d6\U0001f3fc\u200d\u2642', 'man in steamy room: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fd\u200d\u2642\ufe0f', 'man in steamy room: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9d6\U0001f3fd\u200d\u2642', 'man in steamy room: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fe\u200d\u2642\ufe0f', 'man in steamy room: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9d6\U0001f3fe\u200d\u2642', 'man in steamy room: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d6\U0001f3ff\u200d\u2642\ufe0f', 'man in steamy room: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9d6\U0001f3ff\u200d\u2642', 'man in steamy room: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d6\u200d\u2640\ufe0f', 'woman in steamy room', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\u200d\u2640': EmojiRecord('\U0001f9d6\u200d\u2640', 'woman in steamy room', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fb\u200d\u2640\ufe0f', 'woman in steamy room: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9d6\U0001f3fb\u200d\u2640', 'woman in steamy room: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fc\u200d\u2640\ufe0f', 'woman in steamy room: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9d6\U0001f3fc\u200d\u2640', 'woman in steamy room: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fd\u200d\u2640\ufe0f', 'woman in steamy room: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9d6\U0001f3fd\u200d\u2640', 'woman in steamy room: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d6\U0001f3fe\u200d\u2640\ufe0f', 'woman in steamy room: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9d6\U0001f3fe\u200d\u2640', 'woman in steamy room: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d6\U0001f3ff\u200d\u2640\ufe0f', 'woman in steamy room: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d6\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9d6\U0001f3ff\u200d\u2640', 'woman in steamy room: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d6\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7': EmojiRecord('\U0001f9d7', 'person climbing', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fb': EmojiRecord('\U0001f9d7\U0001f3fb', 'person climbing: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fb', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fc': EmojiRecord('\U0001f9d7\U0001f3fc', 'person climbing: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fc', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fd': EmojiRecord('\U0001f9d7\U0001f3fd', 'person climbing: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fd', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fe': EmojiRecord('\U0001f9d7\U0001f3fe', 'person climbing: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fe', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3ff': EmojiRecord('\U0001f9d7\U0001f3ff', 'person climbing: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3ff', 'People & Body', 'person-activity'),
    '\U0001f9d7\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d7\u200d\u2642\ufe0f', 'man climbing', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\u200d\u2642': EmojiRecord('\U0001f9d7\u200d\u2642', 'man climbing', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fb\u200d\u2642\ufe0f', 'man climbing: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9d7\U0001f3fb\u200d\u2642', 'man climbing: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fc\u200d\u2642\ufe0f', 'man climbing: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9d7\U0001f3fc\u200d\u2642', 'man climbing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fd\u200d\u2642\ufe0f', 'man climbing: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9d7\U0001f3fd\u200d\u2642', 'man climbing: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fe\u200d\u2642\ufe0f', 'man climbing: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9d7\U0001f3fe\u200d\u2642', 'man climbing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d7\U0001f3ff\u200d\u2642\ufe0f', 'man climbing: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9d7\U0001f3ff\u200d\u2642', 'man climbing: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d7\u200d\u2640\ufe0f', 'woman climbing', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\u200d\u2640': EmojiRecord('\U0001f9d7\u200d\u2640', 'woman climbing', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fb\u200d\u2640\ufe0f', 'woman climbing: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9d7\U0001f3fb\u200d\u2640', 'woman climbing: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fc\u200d\u2640\ufe0f', 'woman climbing: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9d7\U0001f3fc\u200d\u2640', 'woman climbing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fd\u200d\u2640\ufe0f', 'woman climbing: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9d7\U0001f3fd\u200d\u2640', 'woman climbing: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d7\U0001f3fe\u200d\u2640\ufe0f', 'woman climbing: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9d7\U0001f3fe\u200d\u2640', 'woman climbing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d7\U0001f3ff\u200d\u2640\ufe0f', 'woman climbing: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f9d7\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9d7\U0001f3ff\u200d\u2640', 'woman climbing: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d7\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-activity'),
    '\U0001f93a': EmojiRecord('\U0001f93a', 'person fencing', Status.FULLY_QUALIFIED, '3.0', '\U0001f93a', 'People & Body', 'person-sport'),
    '\U0001f3c7': EmojiRecord('\U0001f3c7', 'horse racing', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c7', 'People & Body', 'person-sport'),
    '\U0001f3c7\U0001f3fb': EmojiRecord('\U0001f3c7\U0001f3fb', 'horse racing: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c7\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f3c7\U0001f3fc': EmojiRecord('\U0001f3c7\U0001f3fc', 'horse racing: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c7\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f3c7\U0001f3fd': EmojiRecord('\U0001f3c7\U0001f3fd', 'horse racing: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c7\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f3c7\U0001f3fe': EmojiRecord('\U0001f3c7\U0001f3fe', 'horse racing: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c7\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f3c7\U0001f3ff': EmojiRecord('\U0001f3c7\U0001f3ff', 'horse racing: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c7\U0001f3ff', 'People & Body', 'person-sport'),
    '\u26f7\ufe0f': EmojiRecord('\u26f7\ufe0f', 'skier', Status.FULLY_QUALIFIED, '0.7', '\u26f7\ufe0f', 'People & Body', 'person-sport'),
    '\u26f7': EmojiRecord('\u26f7', 'skier', Status.UNQUALIFIED, '0.7', '\u26f7\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c2': EmojiRecord('\U0001f3c2', 'snowboarder', Status.FULLY_QUALIFIED, '0.6', '\U0001f3c2', 'People & Body', 'person-sport'),
    '\U0001f3c2\U0001f3fb': EmojiRecord('\U0001f3c2\U0001f3fb', 'snowboarder: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c2\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f3c2\U0001f3fc': EmojiRecord('\U0001f3c2\U0001f3fc', 'snowboarder: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c2\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f3c2\U0001f3fd': EmojiRecord('\U0001f3c2\U0001f3fd', 'snowboarder: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c2\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f3c2\U0001f3fe': EmojiRecord('\U0001f3c2\U0001f3fe', 'snowboarder: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c2\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f3c2\U0001f3ff': EmojiRecord('\U0001f3c2\U0001f3ff', 'snowboarder: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c2\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f3cc\ufe0f': EmojiRecord('\U0001f3cc\ufe0f', 'person golfing', Status.FULLY_QUALIFIED, '0.7', '\U0001f3cc\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc': EmojiRecord('\U0001f3cc', 'person golfing', Status.UNQUALIFIED, '0.7', '\U0001f3cc\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fb': EmojiRecord('\U0001f3cc\U0001f3fb', 'person golfing: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fc': EmojiRecord('\U0001f3cc\U0001f3fc', 'person golfing: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fd': EmojiRecord('\U0001f3cc\U0001f3fd', 'person golfing: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fe': EmojiRecord('\U0001f3cc\U0001f3fe', 'person golfing: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3ff': EmojiRecord('\U0001f3cc\U0001f3ff', 'person golfing: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f3cc\ufe0f\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cc\ufe0f\u200d\u2642\ufe0f', 'man golfing', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cc\u200d\u2642\ufe0f', 'man golfing', Status.UNQUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\ufe0f\u200d\u2642': EmojiRecord('\U0001f3cc\ufe0f\u200d\u2642', 'man golfing', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\u200d\u2642': EmojiRecord('\U0001f3cc\u200d\u2642', 'man golfing', Status.UNQUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fb\u200d\u2642\ufe0f', 'man golfing: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f3cc\U0001f3fb\u200d\u2642', 'man golfing: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fc\u200d\u2642\ufe0f', 'man golfing: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f3cc\U0001f3fc\u200d\u2642', 'man golfing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fd\u200d\u2642\ufe0f', 'man golfing: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f3cc\U0001f3fd\u200d\u2642', 'man golfing: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fe\u200d\u2642\ufe0f', 'man golfing: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f3cc\U0001f3fe\u200d\u2642', 'man golfing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cc\U0001f3ff\u200d\u2642\ufe0f', 'man golfing: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f3cc\U0001f3ff\u200d\u2642', 'man golfing: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\ufe0f\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cc\ufe0f\u200d\u2640\ufe0f', 'woman golfing', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cc\u200d\u2640\ufe0f', 'woman golfing', Status.UNQUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\ufe0f\u200d\u2640': EmojiRecord('\U0001f3cc\ufe0f\u200d\u2640', 'woman golfing', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\u200d\u2640': EmojiRecord('\U0001f3cc\u200d\u2640', 'woman golfing', Status.UNQUALIFIED, '4.0', '\U0001f3cc\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fb\u200d\u2640\ufe0f', 'woman golfing: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f3cc\U0001f3fb\u200d\u2640', 'woman golfing: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fc\u200d\u2640\ufe0f', 'woman golfing: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f3cc\U0001f3fc\u200d\u2640', 'woman golfing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fd\u200d\u2640\ufe0f', 'woman golfing: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f3cc\U0001f3fd\u200d\u2640', 'woman golfing: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cc\U0001f3fe\u200d\u2640\ufe0f', 'woman golfing: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f3cc\U0001f3fe\u200d\u2640', 'woman golfing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cc\U0001f3ff\u200d\u2640\ufe0f', 'woman golfing: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cc\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f3cc\U0001f3ff\u200d\u2640', 'woman golfing: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cc\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4': EmojiRecord('\U0001f3c4', 'person surfing', Status.FULLY_QUALIFIED, '0.6', '\U0001f3c4', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fb': EmojiRecord('\U0001f3c4\U0001f3fb', 'person surfing: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c4\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fc': EmojiRecord('\U0001f3c4\U0001f3fc', 'person surfing: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c4\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fd': EmojiRecord('\U0001f3c4\U0001f3fd', 'person surfing: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c4\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fe': EmojiRecord('\U0001f3c4\U0001f3fe', 'person surfing: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c4\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3ff': EmojiRecord('\U0001f3c4\U0001f3ff', 'person surfing: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c4\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f3c4\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c4\u200d\u2642\ufe0f', 'man surfing', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\u200d\u2642': EmojiRecord('\U0001f3c4\u200d\u2642', 'man surfing', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fb\u200d\u2642\ufe0f', 'man surfing: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f3c4\U0001f3fb\u200d\u2642', 'man surfing: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fc\u200d\u2642\ufe0f', 'man surfing: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f3c4\U0001f3fc\u200d\u2642', 'man surfing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fd\u200d\u2642\ufe0f', 'man surfing: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f3c4\U0001f3fd\u200d\u2642', 'man surfing: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fe\u200d\u2642\ufe0f', 'man surfing: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f3c4\U0001f3fe\u200d\u2642', 'man surfing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f3c4\U0001f3ff\u200d\u2642\ufe0f', 'man surfing: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f3c4\U0001f3ff\u200d\u2642', 'man surfing: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c4\u200d\u2640\ufe0f', 'woman surfing', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\u200d\u2640': EmojiRecord('\U0001f3c4\u200d\u2640', 'woman surfing', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fb\u200d\u2640\ufe0f', 'woman surfing: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f3c4\U0001f3fb\u200d\u2640', 'woman surfing: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fc\u200d\u2640\ufe0f', 'woman surfing: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f3c4\U0001f3fc\u200d\u2640', 'woman surfing: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fd\u200d\u2640\ufe0f', 'woman surfing: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f3c4\U0001f3fd\u200d\u2640', 'woman surfing: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c4\U0001f3fe\u200d\u2640\ufe0f', 'woman surfing: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f3c4\U0001f3fe\u200d\u2640', 'woman surfing: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f3c4\U0001f3ff\u200d\u2640\ufe0f', 'woman surfing: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3c4\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f3c4\U0001f3ff\u200d\u2640', 'woman surfing: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3c4\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3': EmojiRecord('\U0001f6a3', 'person rowing boat', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a3', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fb': EmojiRecord('\U0001f6a3\U0001f3fb', 'person rowing boat: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a3\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fc': EmojiRecord('\U0001f6a3\U0001f3fc', 'person rowing boat: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a3\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fd': EmojiRecord('\U0001f6a3\U0001f3fd', 'person rowing boat: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a3\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fe': EmojiRecord('\U0001f6a3\U0001f3fe', 'person rowing boat: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a3\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3ff': EmojiRecord('\U0001f6a3\U0001f3ff', 'person rowing boat: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a3\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f6a3\u200d\u2642\ufe0f': EmojiRecord('\U0001f6a3\u200d\u2642\ufe0f', 'man rowing boat', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\u200d\u2642': EmojiRecord('\U0001f6a3\u200d\u2642', 'man rowing boat', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fb\u200d\u2642\ufe0f', 'man rowing boat: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f6a3\U0001f3fb\u200d\u2642', 'man rowing boat: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fc\u200d\u2642\ufe0f', 'man rowing boat: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f6a3\U0001f3fc\u200d\u2642', 'man rowing boat: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fd\u200d\u2642\ufe0f', 'man rowing boat: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f6a3\U0001f3fd\u200d\u2642', 'man rowing boat: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fe\u200d\u2642\ufe0f', 'man rowing boat: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f6a3\U0001f3fe\u200d\u2642', 'man rowing boat: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f6a3\U0001f3ff\u200d\u2642\ufe0f', 'man rowing boat: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f6a3\U0001f3ff\u200d\u2642', 'man rowing boat: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\u200d\u2640\ufe0f': EmojiRecord('\U0001f6a3\u200d\u2640\ufe0f', 'woman rowing boat', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\u200d\u2640': EmojiRecord('\U0001f6a3\u200d\u2640', 'woman rowing boat', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fb\u200d\u2640\ufe0f', 'woman rowing boat: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f6a3\U0001f3fb\u200d\u2640', 'woman rowing boat: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fc\u200d\u2640\ufe0f', 'woman rowing boat: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f6a3\U0001f3fc\u200d\u2640', 'woman rowing boat: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fd\u200d\u2640\ufe0f', 'woman rowing boat: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f6a3\U0001f3fd\u200d\u2640', 'woman rowing boat: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f6a3\U0001f3fe\u200d\u2640\ufe0f', 'woman rowing boat: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f6a3\U0001f3fe\u200d\u2640', 'woman rowing boat: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f6a3\U0001f3ff\u200d\u2640\ufe0f', 'woman rowing boat: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6a3\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f6a3\U0001f3ff\u200d\u2640', 'woman rowing boat: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6a3\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca': EmojiRecord('\U0001f3ca', 'person swimming', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ca', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fb': EmojiRecord('\U0001f3ca\U0001f3fb', 'person swimming: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3ca\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fc': EmojiRecord('\U0001f3ca\U0001f3fc', 'person swimming: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3ca\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fd': EmojiRecord('\U0001f3ca\U0001f3fd', 'person swimming: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3ca\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fe': EmojiRecord('\U0001f3ca\U0001f3fe', 'person swimming: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3ca\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3ff': EmojiRecord('\U0001f3ca\U0001f3ff', 'person swimming: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f3ca\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f3ca\u200d\u2642\ufe0f': EmojiRecord('\U0001f3ca\u200d\u2642\ufe0f', 'man swimming', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\u200d\u2642': EmojiRecord('\U0001f3ca\u200d\u2642', 'man swimming', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fb\u200d\u2642\ufe0f', 'man swimming: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f3ca\U0001f3fb\u200d\u2642', 'man swimming: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fc\u200d\u2642\ufe0f', 'man swimming: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f3ca\U0001f3fc\u200d\u2642', 'man swimming: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fd\u200d\u2642\ufe0f', 'man swimming: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f3ca\U0001f3fd\u200d\u2642', 'man swimming: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fe\u200d\u2642\ufe0f', 'man swimming: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f3ca\U0001f3fe\u200d\u2642', 'man swimming: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f3ca\U0001f3ff\u200d\u2642\ufe0f', 'man swimming: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f3ca\U0001f3ff\u200d\u2642', 'man swimming: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\u200d\u2640\ufe0f': EmojiRecord('\U0001f3ca\u200d\u2640\ufe0f', 'woman swimming', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\u200d\u2640': EmojiRecord('\U0001f3ca\u200d\u2640', 'woman swimming', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fb\u200d\u2640\ufe0f', 'woman swimming: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f3ca\U0001f3fb\u200d\u2640', 'woman swimming: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fc\u200d\u2640\ufe0f', 'woman swimming: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f3ca\U0001f3fc\u200d\u2640', 'woman swimming: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fd\u200d\u2640\ufe0f', 'woman swimming: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f3ca\U0001f3fd\u200d\u2640', 'woman swimming: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f3ca\U0001f3fe\u200d\u2640\ufe0f', 'woman swimming: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f3ca\U0001f3fe\u200d\u2640', 'woman swimming: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f3ca\U0001f3ff\u200d\u2640\ufe0f', 'woman swimming: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3ca\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f3ca\U0001f3ff\u200d\u2640', 'woman swimming: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3ca\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\ufe0f': EmojiRecord('\u26f9\ufe0f', 'person bouncing ball', Status.FULLY_QUALIFIED, '0.7', '\u26f9\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9': EmojiRecord('\u26f9', 'person bouncing ball', Status.UNQUALIFIED, '0.7', '\u26f9\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fb': EmojiRecord('\u26f9\U0001f3fb', 'person bouncing ball: light skin tone', Status.FULLY_QUALIFIED, '2.0', '\u26f9\U0001f3fb', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fc': EmojiRecord('\u26f9\U0001f3fc', 'person bouncing ball: medium-light skin tone', Status.FULLY_QUALIFIED, '2.0', '\u26f9\U0001f3fc', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fd': EmojiRecord('\u26f9\U0001f3fd', 'person bouncing ball: medium skin tone', Status.FULLY_QUALIFIED, '2.0', '\u26f9\U0001f3fd', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fe': EmojiRecord('\u26f9\U0001f3fe', 'person bouncing ball: medium-dark skin tone', Status.FULLY_QUALIFIED, '2.0', '\u26f9\U0001f3fe', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3ff': EmojiRecord('\u26f9\U0001f3ff', 'person bouncing ball: dark skin tone', Status.FULLY_QUALIFIED, '2.0', '\u26f9\U0001f3ff', 'People & Body', 'person-sport'),
    '\u26f9\ufe0f\u200d\u2642\ufe0f': EmojiRecord('\u26f9\ufe0f\u200d\u2642\ufe0f', 'man bouncing ball', Status.FULLY_QUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\u200d\u2642\ufe0f': EmojiRecord('\u26f9\u200d\u2642\ufe0f', 'man bouncing ball', Status.UNQUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\ufe0f\u200d\u2642': EmojiRecord('\u26f9\ufe0f\u200d\u2642', 'man bouncing ball', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\u200d\u2642': EmojiRecord('\u26f9\u200d\u2642', 'man bouncing ball', Status.UNQUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\u26f9\U0001f3fb\u200d\u2642\ufe0f', 'man bouncing ball: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fb\u200d\u2642': EmojiRecord('\u26f9\U0001f3fb\u200d\u2642', 'man bouncing ball: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\u26f9\U0001f3fc\u200d\u2642\ufe0f', 'man bouncing ball: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fc\u200d\u2642': EmojiRecord('\u26f9\U0001f3fc\u200d\u2642', 'man bouncing ball: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\u26f9\U0001f3fd\u200d\u2642\ufe0f', 'man bouncing ball: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fd\u200d\u2642': EmojiRecord('\u26f9\U0001f3fd\u200d\u2642', 'man bouncing ball: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\u26f9\U0001f3fe\u200d\u2642\ufe0f', 'man bouncing ball: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fe\u200d\u2642': EmojiRecord('\u26f9\U0001f3fe\u200d\u2642', 'man bouncing ball: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\u26f9\U0001f3ff\u200d\u2642\ufe0f', 'man bouncing ball: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3ff\u200d\u2642': EmojiRecord('\u26f9\U0001f3ff\u200d\u2642', 'man bouncing ball: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\ufe0f\u200d\u2640\ufe0f': EmojiRecord('\u26f9\ufe0f\u200d\u2640\ufe0f', 'woman bouncing ball', Status.FULLY_QUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\u200d\u2640\ufe0f': EmojiRecord('\u26f9\u200d\u2640\ufe0f', 'woman bouncing ball', Status.UNQUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\ufe0f\u200d\u2640': EmojiRecord('\u26f9\ufe0f\u200d\u2640', 'woman bouncing ball', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\u200d\u2640': EmojiRecord('\u26f9\u200d\u2640', 'woman bouncing ball', Status.UNQUALIFIED, '4.0', '\u26f9\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\u26f9\U0001f3fb\u200d\u2640\ufe0f', 'woman bouncing ball: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fb\u200d\u2640': EmojiRecord('\u26f9\U0001f3fb\u200d\u2640', 'woman bouncing ball: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\u26f9\U0001f3fc\u200d\u2640\ufe0f', 'woman bouncing ball: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fc\u200d\u2640': EmojiRecord('\u26f9\U0001f3fc\u200d\u2640', 'woman bouncing ball: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\u26f9\U0001f3fd\u200d\u2640\ufe0f', 'woman bouncing ball: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fd\u200d\u2640': EmojiRecord('\u26f9\U0001f3fd\u200d\u2640', 'woman bouncing ball: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\u26f9\U0001f3fe\u200d\u2640\ufe0f', 'woman bouncing ball: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3fe\u200d\u2640': EmojiRecord('\u26f9\U0001f3fe\u200d\u2640', 'woman bouncing ball: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\u26f9\U0001f3ff\u200d\u2640\ufe0f', 'woman bouncing ball: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\u26f9\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\u26f9\U0001f3ff\u200d\u2640': EmojiRecord('\u26f9\U0001f3ff\u200d\u2640', 'woman bouncing ball: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\u26f9\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\ufe0f': EmojiRecord('\U0001f3cb\ufe0f', 'person lifting weights', Status.FULLY_QUALIFIED, '0.7', '\U0001f3cb\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb': EmojiRecord('\U0001f3cb', 'person lifting weights', Status.UNQUALIFIED, '0.7', '\U0001f3cb\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fb': EmojiRecord('\U0001f3cb\U0001f3fb', 'person lifting weights: light skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f3cb\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fc': EmojiRecord('\U0001f3cb\U0001f3fc', 'person lifting weights: medium-light skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f3cb\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fd': EmojiRecord('\U0001f3cb\U0001f3fd', 'person lifting weights: medium skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f3cb\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fe': EmojiRecord('\U0001f3cb\U0001f3fe', 'person lifting weights: medium-dark skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f3cb\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3ff': EmojiRecord('\U0001f3cb\U0001f3ff', 'person lifting weights: dark skin tone', Status.FULLY_QUALIFIED, '2.0', '\U0001f3cb\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f3cb\ufe0f\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cb\ufe0f\u200d\u2642\ufe0f', 'man lifting weights', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cb\u200d\u2642\ufe0f', 'man lifting weights', Status.UNQUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\ufe0f\u200d\u2642': EmojiRecord('\U0001f3cb\ufe0f\u200d\u2642', 'man lifting weights', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\u200d\u2642': EmojiRecord('\U0001f3cb\u200d\u2642', 'man lifting weights', Status.UNQUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fb\u200d\u2642\ufe0f', 'man lifting weights: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f3cb\U0001f3fb\u200d\u2642', 'man lifting weights: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fc\u200d\u2642\ufe0f', 'man lifting weights: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f3cb\U0001f3fc\u200d\u2642', 'man lifting weights: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fd\u200d\u2642\ufe0f', 'man lifting weights: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f3cb\U0001f3fd\u200d\u2642', 'man lifting weights: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fe\u200d\u2642\ufe0f', 'man lifting weights: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f3cb\U0001f3fe\u200d\u2642', 'man lifting weights: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f3cb\U0001f3ff\u200d\u2642\ufe0f', 'man lifting weights: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f3cb\U0001f3ff\u200d\u2642', 'man lifting weights: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\ufe0f\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cb\ufe0f\u200d\u2640\ufe0f', 'woman lifting weights', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cb\u200d\u2640\ufe0f', 'woman lifting weights', Status.UNQUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\ufe0f\u200d\u2640': EmojiRecord('\U0001f3cb\ufe0f\u200d\u2640', 'woman lifting weights', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\u200d\u2640': EmojiRecord('\U0001f3cb\u200d\u2640', 'woman lifting weights', Status.UNQUALIFIED, '4.0', '\U0001f3cb\ufe0f\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fb\u200d\u2640\ufe0f', 'woman lifting weights: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f3cb\U0001f3fb\u200d\u2640', 'woman lifting weights: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fc\u200d\u2640\ufe0f', 'woman lifting weights: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f3cb\U0001f3fc\u200d\u2640', 'woman lifting weights: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fd\u200d\u2640\ufe0f', 'woman lifting weights: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f3cb\U0001f3fd\u200d\u2640', 'woman lifting weights: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cb\U0001f3fe\u200d\u2640\ufe0f', 'woman lifting weights: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f3cb\U0001f3fe\u200d\u2640', 'woman lifting weights: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f3cb\U0001f3ff\u200d\u2640\ufe0f', 'woman lifting weights: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f3cb\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f3cb\U0001f3ff\u200d\u2640', 'woman lifting weights: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f3cb\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4': EmojiRecord('\U0001f6b4', 'person biking', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b4', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fb': EmojiRecord('\U0001f6b4\U0001f3fb', 'person biking: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b4\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fc': EmojiRecord('\U0001f6b4\U0001f3fc', 'person biking: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b4\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fd': EmojiRecord('\U0001f6b4\U0001f3fd', 'person biking: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b4\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fe': EmojiRecord('\U0001f6b4\U0001f3fe', 'person biking: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b4\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3ff': EmojiRecord('\U0001f6b4\U0001f3ff', 'person biking: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b4\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f6b4\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b4\u200d\u2642\ufe0f', 'man biking', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\u200d\u2642': EmojiRecord('\U0001f6b4\u200d\u2642', 'man biking', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fb\u200d\u2642\ufe0f', 'man biking: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f6b4\U0001f3fb\u200d\u2642', 'man biking: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fc\u200d\u2642\ufe0f', 'man biking: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f6b4\U0001f3fc\u200d\u2642', 'man biking: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fd\u200d\u2642\ufe0f', 'man biking: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f6b4\U0001f3fd\u200d\u2642', 'man biking: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fe\u200d\u2642\ufe0f', 'man biking: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f6b4\U0001f3fe\u200d\u2642', 'man biking: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b4\U0001f3ff\u200d\u2642\ufe0f', 'man biking: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f6b4\U0001f3ff\u200d\u2642', 'man biking: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b4\u200d\u2640\ufe0f', 'woman biking', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\u200d\u2640': EmojiRecord('\U0001f6b4\u200d\u2640', 'woman biking', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fb\u200d\u2640\ufe0f', 'woman biking: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f6b4\U0001f3fb\u200d\u2640', 'woman biking: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fc\u200d\u2640\ufe0f', 'woman biking: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f6b4\U0001f3fc\u200d\u2640', 'woman biking: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fd\u200d\u2640\ufe0f', 'woman biking: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f6b4\U0001f3fd\u200d\u2640', 'woman biking: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b4\U0001f3fe\u200d\u2640\ufe0f', 'woman biking: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f6b4\U0001f3fe\u200d\u2640', 'woman biking: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b4\U0001f3ff\u200d\u2640\ufe0f', 'woman biking: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b4\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f6b4\U0001f3ff\u200d\u2640', 'woman biking: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b4\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5': EmojiRecord('\U0001f6b5', 'person mountain biking', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b5', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fb': EmojiRecord('\U0001f6b5\U0001f3fb', 'person mountain biking: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b5\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fc': EmojiRecord('\U0001f6b5\U0001f3fc', 'person mountain biking: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b5\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fd': EmojiRecord('\U0001f6b5\U0001f3fd', 'person mountain biking: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b5\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fe': EmojiRecord('\U0001f6b5\U0001f3fe', 'person mountain biking: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b5\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3ff': EmojiRecord('\U0001f6b5\U0001f3ff', 'person mountain biking: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b5\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f6b5\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b5\u200d\u2642\ufe0f', 'man mountain biking', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\u200d\u2642': EmojiRecord('\U0001f6b5\u200d\u2642', 'man mountain biking', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fb\u200d\u2642\ufe0f', 'man mountain biking: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f6b5\U0001f3fb\u200d\u2642', 'man mountain biking: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fc\u200d\u2642\ufe0f', 'man mountain biking: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f6b5\U0001f3fc\u200d\u2642', 'man mountain biking: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fd\u200d\u2642\ufe0f', 'man mountain biking: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f6b5\U0001f3fd\u200d\u2642', 'man mountain biking: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fe\u200d\u2642\ufe0f', 'man mountain biking: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f6b5\U0001f3fe\u200d\u2642', 'man mountain biking: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f6b5\U0001f3ff\u200d\u2642\ufe0f', 'man mountain biking: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f6b5\U0001f3ff\u200d\u2642', 'man mountain biking: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b5\u200d\u2640\ufe0f', 'woman mountain biking', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\u200d\u2640': EmojiRecord('\U0001f6b5\u200d\u2640', 'woman mountain biking', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fb\u200d\u2640\ufe0f', 'woman mountain biking: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f6b5\U0001f3fb\u200d\u2640', 'woman mountain biking: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fc\u200d\u2640\ufe0f', 'woman mountain biking: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f6b5\U0001f3fc\u200d\u2640', 'woman mountain biking: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fd\u200d\u2640\ufe0f', 'woman mountain biking: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f6b5\U0001f3fd\u200d\u2640', 'woman mountain biking: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b5\U0001f3fe\u200d\u2640\ufe0f', 'woman mountain biking: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f6b5\U0001f3fe\u200d\u2640', 'woman mountain biking: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f6b5\U0001f3ff\u200d\u2640\ufe0f', 'woman mountain biking: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f6b5\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f6b5\U0001f3ff\u200d\u2640', 'woman mountain biking: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f6b5\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938': EmojiRecord('\U0001f938', 'person cartwheeling', Status.FULLY_QUALIFIED, '3.0', '\U0001f938', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fb': EmojiRecord('\U0001f938\U0001f3fb', 'person cartwheeling: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f938\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fc': EmojiRecord('\U0001f938\U0001f3fc', 'person cartwheeling: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f938\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fd': EmojiRecord('\U0001f938\U0001f3fd', 'person cartwheeling: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f938\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fe': EmojiRecord('\U0001f938\U0001f3fe', 'person cartwheeling: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f938\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3ff': EmojiRecord('\U0001f938\U0001f3ff', 'person cartwheeling: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f938\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f938\u200d\u2642\ufe0f': EmojiRecord('\U0001f938\u200d\u2642\ufe0f', 'man cartwheeling', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\u200d\u2642': EmojiRecord('\U0001f938\u200d\u2642', 'man cartwheeling', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f938\U0001f3fb\u200d\u2642\ufe0f', 'man cartwheeling: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f938\U0001f3fb\u200d\u2642', 'man cartwheeling: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f938\U0001f3fc\u200d\u2642\ufe0f', 'man cartwheeling: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f938\U0001f3fc\u200d\u2642', 'man cartwheeling: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f938\U0001f3fd\u200d\u2642\ufe0f', 'man cartwheeling: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f938\U0001f3fd\u200d\u2642', 'man cartwheeling: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f938\U0001f3fe\u200d\u2642\ufe0f', 'man cartwheeling: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f938\U0001f3fe\u200d\u2642', 'man cartwheeling: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f938\U0001f3ff\u200d\u2642\ufe0f', 'man cartwheeling: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f938\U0001f3ff\u200d\u2642', 'man cartwheeling: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\u200d\u2640\ufe0f': EmojiRecord('\U0001f938\u200d\u2640\ufe0f', 'woman cartwheeling', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\u200d\u2640': EmojiRecord('\U0001f938\u200d\u2640', 'woman cartwheeling', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f938\U0001f3fb\u200d\u2640\ufe0f', 'woman cartwheeling: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f938\U0001f3fb\u200d\u2640', 'woman cartwheeling: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f938\U0001f3fc\u200d\u2640\ufe0f', 'woman cartwheeling: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f938\U0001f3fc\u200d\u2640', 'woman cartwheeling: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f938\U0001f3fd\u200d\u2640\ufe0f', 'woman cartwheeling: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f938\U0001f3fd\u200d\u2640', 'woman cartwheeling: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f938\U0001f3fe\u200d\u2640\ufe0f', 'woman cartwheeling: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f938\U0001f3fe\u200d\u2640', 'woman cartwheeling: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f938\U0001f3ff\u200d\u2640\ufe0f', 'woman cartwheeling: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f938\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f938\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f938\U0001f3ff\u200d\u2640', 'woman cartwheeling: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f938\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93c': EmojiRecord('\U0001f93c', 'people wrestling', Status.FULLY_QUALIFIED, '3.0', '\U0001f93c', 'People & Body', 'person-sport'),
    '\U0001f93c\u200d\u2642\ufe0f': EmojiRecord('\U0001f93c\u200d\u2642\ufe0f', 'men wrestling', Status.FULLY_QUALIFIED, '4.0', '\U0001f93c\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93c\u200d\u2642': EmojiRecord('\U0001f93c\u200d\u2642', 'men wrestling', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93c\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93c\u200d\u2640\ufe0f': EmojiRecord('\U0001f93c\u200d\u2640\ufe0f', 'women wrestling', Status.FULLY_QUALIFIED, '4.0', '\U0001f93c\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93c\u200d\u2640': EmojiRecord('\U0001f93c\u200d\u2640', 'women wrestling', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93c\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d': EmojiRecord('\U0001f93d', 'person playing water polo', Status.FULLY_QUALIFIED, '3.0', '\U0001f93d', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fb': EmojiRecord('\U0001f93d\U0001f3fb', 'person playing water polo: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93d\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fc': EmojiRecord('\U0001f93d\U0001f3fc', 'person playing water polo: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93d\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fd': EmojiRecord('\U0001f93d\U0001f3fd', 'person playing water polo: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93d\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fe': EmojiRecord('\U0001f93d\U0001f3fe', 'person playing water polo: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93d\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3ff': EmojiRecord('\U0001f93d\U0001f3ff', 'person playing water polo: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93d\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f93d\u200d\u2642\ufe0f': EmojiRecord('\U0001f93d\u200d\u2642\ufe0f', 'man playing water polo', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\u200d\u2642': EmojiRecord('\U0001f93d\u200d\u2642', 'man playing water polo', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f93d\U0001f3fb\u200d\u2642\ufe0f', 'man playing water polo: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f93d\U0001f3fb\u200d\u2642', 'man playing water polo: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f93d\U0001f3fc\u200d\u2642\ufe0f', 'man playing water polo: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f93d\U0001f3fc\u200d\u2642', 'man playing water polo: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f93d\U0001f3fd\u200d\u2642\ufe0f', 'man playing water polo: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f93d\U0001f3fd\u200d\u2642', 'man playing water polo: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f93d\U0001f3fe\u200d\u2642\ufe0f', 'man playing water polo: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f93d\U0001f3fe\u200d\u2642', 'man playing water polo: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f93d\U0001f3ff\u200d\u2642\ufe0f', 'man playing water polo: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f93d\U0001f3ff\u200d\u2642', 'man playing water polo: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\u200d\u2640\ufe0f': EmojiRecord('\U0001f93d\u200d\u2640\ufe0f', 'woman playing water polo', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\u200d\u2640': EmojiRecord('\U0001f93d\u200d\u2640', 'woman playing water polo', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f93d\U0001f3fb\u200d\u2640\ufe0f', 'woman playing water polo: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f93d\U0001f3fb\u200d\u2640', 'woman playing water polo: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f93d\U0001f3fc\u200d\u2640\ufe0f', 'woman playing water polo: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f93d\U0001f3fc\u200d\u2640', 'woman playing water polo: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f93d\U0001f3fd\u200d\u2640\ufe0f', 'woman playing water polo: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f93d\U0001f3fd\u200d\u2640', 'woman playing water polo: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f93d\U0001f3fe\u200d\u2640\ufe0f', 'woman playing water polo: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f93d\U0001f3fe\u200d\u2640', 'woman playing water polo: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f93d\U0001f3ff\u200d\u2640\ufe0f', 'woman playing water polo: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93d\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f93d\U0001f3ff\u200d\u2640', 'woman playing water polo: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93d\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e': EmojiRecord('\U0001f93e', 'person playing handball', Status.FULLY_QUALIFIED, '3.0', '\U0001f93e', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fb': EmojiRecord('\U0001f93e\U0001f3fb', 'person playing handball: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93e\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fc': EmojiRecord('\U0001f93e\U0001f3fc', 'person playing handball: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93e\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fd': EmojiRecord('\U0001f93e\U0001f3fd', 'person playing handball: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93e\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fe': EmojiRecord('\U0001f93e\U0001f3fe', 'person playing handball: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93e\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3ff': EmojiRecord('\U0001f93e\U0001f3ff', 'person playing handball: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f93e\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f93e\u200d\u2642\ufe0f': EmojiRecord('\U0001f93e\u200d\u2642\ufe0f', 'man playing handball', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\u200d\u2642': EmojiRecord('\U0001f93e\u200d\u2642', 'man playing handball', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f93e\U0001f3fb\u200d\u2642\ufe0f', 'man playing handball: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f93e\U0001f3fb\u200d\u2642', 'man playing handball: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f93e\U0001f3fc\u200d\u2642\ufe0f', 'man playing handball: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f93e\U0001f3fc\u200d\u2642', 'man playing handball: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f93e\U0001f3fd\u200d\u2642\ufe0f', 'man playing handball: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f93e\U0001f3fd\u200d\u2642', 'man playing handball: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f93e\U0001f3fe\u200d\u2642\ufe0f', 'man playing handball: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f93e\U0001f3fe\u200d\u2642', 'man playing handball: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f93e\U0001f3ff\u200d\u2642\ufe0f', 'man playing handball: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f93e\U0001f3ff\u200d\u2642', 'man playing handball: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\u200d\u2640\ufe0f': EmojiRecord('\U0001f93e\u200d\u2640\ufe0f', 'woman playing handball', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\u200d\u2640': EmojiRecord('\U0001f93e\u200d\u2640', 'woman playing handball', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f93e\U0001f3fb\u200d\u2640\ufe0f', 'woman playing handball: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f93e\U0001f3fb\u200d\u2640', 'woman playing handball: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f93e\U0001f3fc\u200d\u2640\ufe0f', 'woman playing handball: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f93e\U0001f3fc\u200d\u2640', 'woman playing handball: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f93e\U0001f3fd\u200d\u2640\ufe0f', 'woman playing handball: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f93e\U0001f3fd\u200d\u2640', 'woman playing handball: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f93e\U0001f3fe\u200d\u2640\ufe0f', 'woman playing handball: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f93e\U0001f3fe\u200d\u2640', 'woman playing handball: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f93e\U0001f3ff\u200d\u2640\ufe0f', 'woman playing handball: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f93e\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f93e\U0001f3ff\u200d\u2640', 'woman playing handball: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f93e\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939': EmojiRecord('\U0001f939', 'person juggling', Status.FULLY_QUALIFIED, '3.0', '\U0001f939', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fb': EmojiRecord('\U0001f939\U0001f3fb', 'person juggling: light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f939\U0001f3fb', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fc': EmojiRecord('\U0001f939\U0001f3fc', 'person juggling: medium-light skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f939\U0001f3fc', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fd': EmojiRecord('\U0001f939\U0001f3fd', 'person juggling: medium skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f939\U0001f3fd', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fe': EmojiRecord('\U0001f939\U0001f3fe', 'person juggling: medium-dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f939\U0001f3fe', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3ff': EmojiRecord('\U0001f939\U0001f3ff', 'person juggling: dark skin tone', Status.FULLY_QUALIFIED, '3.0', '\U0001f939\U0001f3ff', 'People & Body', 'person-sport'),
    '\U0001f939\u200d\u2642\ufe0f': EmojiRecord('\U0001f939\u200d\u2642\ufe0f', 'man juggling', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\u200d\u2642': EmojiRecord('\U0001f939\u200d\u2642', 'man juggling', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f939\U0001f3fb\u200d\u2642\ufe0f', 'man juggling: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f939\U0001f3fb\u200d\u2642', 'man juggling: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f939\U0001f3fc\u200d\u2642\ufe0f', 'man juggling: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f939\U0001f3fc\u200d\u2642', 'man juggling: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f939\U0001f3fd\u200d\u2642\ufe0f', 'man juggling: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f939\U0001f3fd\u200d\u2642', 'man juggling: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f939\U0001f3fe\u200d\u2642\ufe0f', 'man juggling: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f939\U0001f3fe\u200d\u2642', 'man juggling: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f939\U0001f3ff\u200d\u2642\ufe0f', 'man juggling: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f939\U0001f3ff\u200d\u2642', 'man juggling: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\u200d\u2640\ufe0f': EmojiRecord('\U0001f939\u200d\u2640\ufe0f', 'woman juggling', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\u200d\u2640': EmojiRecord('\U0001f939\u200d\u2640', 'woman juggling', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f939\U0001f3fb\u200d\u2640\ufe0f', 'woman juggling: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f939\U0001f3fb\u200d\u2640', 'woman juggling: light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f939\U0001f3fc\u200d\u2640\ufe0f', 'woman juggling: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f939\U0001f3fc\u200d\u2640', 'woman juggling: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f939\U0001f3fd\u200d\u2640\ufe0f', 'woman juggling: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f939\U0001f3fd\u200d\u2640', 'woman juggling: medium skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f939\U0001f3fe\u200d\u2640\ufe0f', 'woman juggling: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f939\U0001f3fe\u200d\u2640', 'woman juggling: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f939\U0001f3ff\u200d\u2640\ufe0f', 'woman juggling: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f939\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f939\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f939\U0001f3ff\u200d\u2640', 'woman juggling: dark skin tone', Status.MINIMALLY_QUALIFIED, '4.0', '\U0001f939\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-sport'),
    '\U0001f9d8': EmojiRecord('\U0001f9d8', 'person in lotus position', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fb': EmojiRecord('\U0001f9d8\U0001f3fb', 'person in lotus position: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fb', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fc': EmojiRecord('\U0001f9d8\U0001f3fc', 'person in lotus position: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fc', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fd': EmojiRecord('\U0001f9d8\U0001f3fd', 'person in lotus position: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fd', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fe': EmojiRecord('\U0001f9d8\U0001f3fe', 'person in lotus position: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fe', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3ff': EmojiRecord('\U0001f9d8\U0001f3ff', 'person in lotus position: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3ff', 'People & Body', 'person-resting'),
    '\U0001f9d8\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d8\u200d\u2642\ufe0f', 'man in lotus position', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\u200d\u2642': EmojiRecord('\U0001f9d8\u200d\u2642', 'man in lotus position', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fb\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fb\u200d\u2642\ufe0f', 'man in lotus position: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fb\u200d\u2642': EmojiRecord('\U0001f9d8\U0001f3fb\u200d\u2642', 'man in lotus position: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fb\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fc\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fc\u200d\u2642\ufe0f', 'man in lotus position: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fc\u200d\u2642': EmojiRecord('\U0001f9d8\U0001f3fc\u200d\u2642', 'man in lotus position: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fc\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fd\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fd\u200d\u2642\ufe0f', 'man in lotus position: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fd\u200d\u2642': EmojiRecord('\U0001f9d8\U0001f3fd\u200d\u2642', 'man in lotus position: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fd\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fe\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fe\u200d\u2642\ufe0f', 'man in lotus position: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fe\u200d\u2642': EmojiRecord('\U0001f9d8\U0001f3fe\u200d\u2642', 'man in lotus position: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fe\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3ff\u200d\u2642\ufe0f': EmojiRecord('\U0001f9d8\U0001f3ff\u200d\u2642\ufe0f', 'man in lotus position: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3ff\u200d\u2642': EmojiRecord('\U0001f9d8\U0001f3ff\u200d\u2642', 'man in lotus position: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3ff\u200d\u2642\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d8\u200d\u2640\ufe0f', 'woman in lotus position', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\u200d\u2640': EmojiRecord('\U0001f9d8\u200d\u2640', 'woman in lotus position', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fb\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fb\u200d\u2640\ufe0f', 'woman in lotus position: light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fb\u200d\u2640': EmojiRecord('\U0001f9d8\U0001f3fb\u200d\u2640', 'woman in lotus position: light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fb\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fc\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fc\u200d\u2640\ufe0f', 'woman in lotus position: medium-light skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fc\u200d\u2640': EmojiRecord('\U0001f9d8\U0001f3fc\u200d\u2640', 'woman in lotus position: medium-light skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fc\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fd\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fd\u200d\u2640\ufe0f', 'woman in lotus position: medium skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fd\u200d\u2640': EmojiRecord('\U0001f9d8\U0001f3fd\u200d\u2640', 'woman in lotus position: medium skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fd\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fe\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d8\U0001f3fe\u200d\u2640\ufe0f', 'woman in lotus position: medium-dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3fe\u200d\u2640': EmojiRecord('\U0001f9d8\U0001f3fe\u200d\u2640', 'woman in lotus position: medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3fe\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3ff\u200d\u2640\ufe0f': EmojiRecord('\U0001f9d8\U0001f3ff\u200d\u2640\ufe0f', 'woman in lotus position: dark skin tone', Status.FULLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f9d8\U0001f3ff\u200d\u2640': EmojiRecord('\U0001f9d8\U0001f3ff\u200d\u2640', 'woman in lotus position: dark skin tone', Status.MINIMALLY_QUALIFIED, '5.0', '\U0001f9d8\U0001f3ff\u200d\u2640\ufe0f', 'People & Body', 'person-resting'),
    '\U0001f6c0': EmojiRecord('\U0001f6c0', 'person taking bath', Status.FULLY_QUALIFIED, '0.6', '\U0001f6c0', 'People & Body', 'person-resting'),
    '\U0001f6c0\U0001f3fb': EmojiRecord('\U0001f6c0\U0001f3fb', 'person taking bath: light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c0\U0001f3fb', 'People & Body', 'person-resting'),
    '\U0001f6c0\U0001f3fc': EmojiRecord('\U0001f6c0\U0001f3fc', 'person taking bath: medium-light skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c0\U0001f3fc', 'People & Body', 'person-resting'),
    '\U0001f6c0\U0001f3fd': EmojiRecord('\U0001f6c0\U0001f3fd', 'person taking bath: medium skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c0\U0001f3fd', 'People & Body', 'person-resting'),
    '\U0001f6c0\U0001f3fe': EmojiRecord('\U0001f6c0\U0001f3fe', 'person taking bath: medium-dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c0\U0001f3fe', 'People & Body', 'person-resting'),
    '\U0001f6c0\U0001f3ff': EmojiRecord('\U0001f6c0\U0001f3ff', 'person taking bath: dark skin tone', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c0\U0001f3ff', 'People & Body', 'person-resting'),
    '\U0001f6cc': EmojiRecord('\U0001f6cc', 'person in bed', Status.FULLY_QUALIFIED, '1.0', '\U0001f6cc', 'People & Body', 'person-resting'),
    '\U0001f6cc\U0001f3fb': EmojiRecord('\U0001f6cc\U0001f3fb', 'person in bed: light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6cc\U0001f3fb', 'People & Body', 'person-resting'),
    '\U0001f6cc\U0001f3fc': EmojiRecord('\U0001f6cc\U0001f3fc', 'person in bed: medium-light skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6cc\U0001f3fc', 'People & Body', 'person-resting'),
    '\U0001f6cc\U0001f3fd': EmojiRecord('\U0001f6cc\U0001f3fd', 'person in bed: medium skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6cc\U0001f3fd', 'People & Body', 'person-resting'),
    '\U0001f6cc\U0001f3fe': EmojiRecord('\U0001f6cc\U0001f3fe', 'person in bed: medium-dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6cc\U0001f3fe', 'People & Body', 'person-resting'),
    '\U0001f6cc\U0001f3ff': EmojiRecord('\U0001f6cc\U0001f3ff', 'person in bed: dark skin tone', Status.FULLY_QUALIFIED, '4.0', '\U0001f6cc\U0001f3ff', 'People & Body', 'person-resting'),
    '\U0001f9d1\u200d\U0001f91d\u200d\U0001f9d1': EmojiRecord('\U0001f9d1\u200d\U0001f91d\u200d\U0001f9d1', 'people holding hands', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\u200d\U0001f91d\u200d\U0001f9d1', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'people holding hands: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'people holding hands: light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'people holding hands: light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'people holding hands: light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'people holding hands: light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'people holding hands: medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'people holding hands: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'people holding hands: medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'people holding hands: medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'people holding hands: medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'people holding hands: medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'people holding hands: medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'people holding hands: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'people holding hands: medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'people holding hands: medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'people holding hands: medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'people holding hands: medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'people holding hands: medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'people holding hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'people holding hands: medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'people holding hands: dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'people holding hands: dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'people holding hands: dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'people holding hands: dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'people holding hands: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f46d': EmojiRecord('\U0001f46d', 'women holding hands', Status.FULLY_QUALIFIED, '1.0', '\U0001f46d', 'People & Body', 'family'),
    '\U0001f46d\U0001f3fb': EmojiRecord('\U0001f46d\U0001f3fb', 'women holding hands: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46d\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'women holding hands: light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'women holding hands: light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'women holding hands: light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'women holding hands: light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'women holding hands: medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f46d\U0001f3fc': EmojiRecord('\U0001f46d\U0001f3fc', 'women holding hands: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46d\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'women holding hands: medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'women holding hands: medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'women holding hands: medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'women holding hands: medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'women holding hands: medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f46d\U0001f3fd': EmojiRecord('\U0001f46d\U0001f3fd', 'women holding hands: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46d\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'women holding hands: medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'women holding hands: medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'women holding hands: medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'women holding hands: medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'women holding hands: medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f46d\U0001f3fe': EmojiRecord('\U0001f46d\U0001f3fe', 'women holding hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46d\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'women holding hands: medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'women holding hands: dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'women holding hands: dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'women holding hands: dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'women holding hands: dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f46d\U0001f3ff': EmojiRecord('\U0001f46d\U0001f3ff', 'women holding hands: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46d\U0001f3ff', 'People & Body', 'family'),
    '\U0001f46b': EmojiRecord('\U0001f46b', 'woman and man holding hands', Status.FULLY_QUALIFIED, '0.6', '\U0001f46b', 'People & Body', 'family'),
    '\U0001f46b\U0001f3fb': EmojiRecord('\U0001f46b\U0001f3fb', 'woman and man holding hands: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46b\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'woman and man holding hands: light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'woman and man holding hands: light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'woman and man holding hands: light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'woman and man holding hands: light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'woman and man holding hands: medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f46b\U0001f3fc': EmojiRecord('\U0001f46b\U0001f3fc', 'woman and man holding hands: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46b\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'woman and man holding hands: medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'woman and man holding hands: medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'woman and man holding hands: medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'woman and man holding hands: medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'woman and man holding hands: medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f46b\U0001f3fd': EmojiRecord('\U0001f46b\U0001f3fd', 'woman and man holding hands: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46b\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'woman and man holding hands: medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'woman and man holding hands: medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'woman and man holding hands: medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'woman and man holding hands: medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'woman and man holding hands: medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f46b\U0001f3fe': EmojiRecord('\U0001f46b\U0001f3fe', 'woman and man holding hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46b\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'woman and man holding hands: medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'woman and man holding hands: dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'woman and man holding hands: dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'woman and man holding hands: dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'woman and man holding hands: dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f46b\U0001f3ff': EmojiRecord('\U0001f46b\U0001f3ff', 'woman and man holding hands: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46b\U0001f3ff', 'People & Body', 'family'),
    '\U0001f46c': EmojiRecord('\U0001f46c', 'men holding hands', Status.FULLY_QUALIFIED, '1.0', '\U0001f46c', 'People & Body', 'family'),
    '\U0001f46c\U0001f3fb': EmojiRecord('\U0001f46c\U0001f3fb', 'men holding hands: light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46c\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'men holding hands: light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'men holding hands: light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'men holding hands: light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'men holding hands: light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'men holding hands: medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f46c\U0001f3fc': EmojiRecord('\U0001f46c\U0001f3fc', 'men holding hands: medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46c\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'men holding hands: medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'men holding hands: medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'men holding hands: medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'men holding hands: medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'men holding hands: medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f46c\U0001f3fd': EmojiRecord('\U0001f46c\U0001f3fd', 'men holding hands: medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46c\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'men holding hands: medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'men holding hands: medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'men holding hands: medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'men holding hands: medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'men holding hands: medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f46c\U0001f3fe': EmojiRecord('\U0001f46c\U0001f3fe', 'men holding hands: medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46c\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'men holding hands: medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '12.1', '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'men holding hands: dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'men holding hands: dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'men holding hands: dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'men holding hands: dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f46c\U0001f3ff': EmojiRecord('\U0001f46c\U0001f3ff', 'men holding hands: dark skin tone', Status.FULLY_QUALIFIED, '12.0', '\U0001f46c\U0001f3ff', 'People & Body', 'family'),
    '\U0001f48f': EmojiRecord('\U0001f48f', 'kiss', Status.FULLY_QUALIFIED, '0.6', '\U0001f48f', 'People & Body', 'family'),
    '\U0001f48f\U0001f3fb': EmojiRecord('\U0001f48f\U0001f3fb', 'kiss: light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f48f\U0001f3fb', 'People & Body', 'family'),
    '\U0001f48f\U0001f3fc': EmojiRecord('\U0001f48f\U0001f3fc', 'kiss: medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f48f\U0001f3fc', 'People & Body', 'family'),
    '\U0001f48f\U0001f3fd': EmojiRecord('\U0001f48f\U0001f3fd', 'kiss: medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f48f\U0001f3fd', 'People & Body', 'family'),
    '\U0001f48f\U0001f3fe': EmojiRecord('\U0001f48f\U0001f3fe', 'kiss: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f48f\U0001f3fe', 'People & Body', 'family'),
    '\U0001f48f\U0001f3ff': EmojiRecord('\U0001f48f\U0001f3ff', 'kiss: dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f48f\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'kiss: person, person, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'kiss: person, person, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'kiss: person, person, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'kiss: person, person, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'kiss: person, person, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468': EmojiRecord('\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468', 'kiss: woman, man', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\u200d\U0001f48b\u200d\U0001f468': EmojiRecord('\U0001f469\u200d\u2764\u200d\U0001f48b\u200d\U0001f468', 'kiss: woman, man', Status.MINIMALLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: woman, man, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: woman, man, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: woman, man, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: woman, man, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: woman, man, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468': EmojiRecord('\U0001f468\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468', 'kiss: man, man', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f468\u200d\u2764\u200d\U0001f48b\u200d\U0001f468': EmojiRecord('\U0001f468\u200d\u2764\u200d\U0001f48b\u200d\U0001f468', 'kiss: man, man', Status.MINIMALLY_QUALIFIED, '2.0', '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'kiss: man, man, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'kiss: man, man, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'kiss: man, man, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'kiss: man, man, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'kiss: man, man, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469': EmojiRecord('\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469', 'kiss: woman, woman', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\u200d\U0001f48b\u200d\U0001f469': EmojiRecord('\U0001f469\u200d\u2764\u200d\U0001f48b\u200d\U0001f469', 'kiss: woman, woman', Status.MINIMALLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'kiss: woman, woman, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'kiss: woman, woman, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'kiss: woman, woman, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'kiss: woman, woman, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'kiss: woman, woman, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f491': EmojiRecord('\U0001f491', 'couple with heart', Status.FULLY_QUALIFIED, '0.6', '\U0001f491', 'People & Body', 'family'),
    '\U0001f491\U0001f3fb': EmojiRecord('\U0001f491\U0001f3fb', 'couple with heart: light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f491\U0001f3fb', 'People & Body', 'family'),
    '\U0001f491\U0001f3fc': EmojiRecord('\U0001f491\U0001f3fc', 'couple with heart: medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f491\U0001f3fc', 'People & Body', 'family'),
    '\U0001f491\U0001f3fd': EmojiRecord('\U0001f491\U0001f3fd', 'couple with heart: medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f491\U0001f3fd', 'People & Body', 'family'),
    '\U0001f491\U0001f3fe': EmojiRecord('\U0001f491\U0001f3fe', 'couple with heart: medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f491\U0001f3fe', 'People & Body', 'family'),
    '\U0001f491\U0001f3ff': EmojiRecord('\U0001f491\U0001f3ff', 'couple with heart: dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f491\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fb\u200d\u2764\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fc\u200d\u2764\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fd\u200d\u2764\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3ff': EmojiRecord('\U0001f9d1\U0001f3fe\u200d\u2764\u200d\U0001f9d1\U0001f3ff', 'couple with heart: person, person, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fb': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fb', 'couple with heart: person, person, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fc': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fc', 'couple with heart: person, person, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fd': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fd', 'couple with heart: person, person, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fe': EmojiRecord('\U0001f9d1\U0001f3ff\u200d\u2764\u200d\U0001f9d1\U0001f3fe', 'couple with heart: person, person, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f468': EmojiRecord('\U0001f469\u200d\u2764\ufe0f\u200d\U0001f468', 'couple with heart: woman, man', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\u200d\U0001f468': EmojiRecord('\U0001f469\u200d\u2764\u200d\U0001f468', 'couple with heart: woman, man', Status.MINIMALLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: woman, man, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: woman, man, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: woman, man, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: woman, man, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: woman, man, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f468': EmojiRecord('\U0001f468\u200d\u2764\ufe0f\u200d\U0001f468', 'couple with heart: man, man', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f468\u200d\u2764\u200d\U0001f468': EmojiRecord('\U0001f468\u200d\u2764\u200d\U0001f468', 'couple with heart: man, man', Status.MINIMALLY_QUALIFIED, '2.0', '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f468', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fb\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fc\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fd\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3fe\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fb': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fb', 'couple with heart: man, man, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fc': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fc', 'couple with heart: man, man, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fd': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fd', 'couple with heart: man, man, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fe': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3fe', 'couple with heart: man, man, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3ff': EmojiRecord('\U0001f468\U0001f3ff\u200d\u2764\u200d\U0001f468\U0001f3ff', 'couple with heart: man, man, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f469': EmojiRecord('\U0001f469\u200d\u2764\ufe0f\u200d\U0001f469', 'couple with heart: woman, woman', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f469', 'People & Body', 'family'),
    '\U0001f469\u200d\u2764\u200d\U0001f469': EmojiRecord('\U0001f469\u200d\u2764\u200d\U0001f469', 'couple with heart: woman, woman', Status.MINIMALLY_QUALIFIED, '2.0', '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f469', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, light skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, light skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fb\u200d\u2764\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, medium-light skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, medium-light skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, medium-light skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, medium-light skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, medium-light skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, medium-light skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, medium-light skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fc\u200d\u2764\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, medium-light skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, medium skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, medium skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, medium skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, medium skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, medium skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, medium skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, medium skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fd\u200d\u2764\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, medium skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, medium-dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, medium-dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, medium-dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, medium-dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, medium-dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, medium-dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, medium-dark skin tone, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3fe\u200d\u2764\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, medium-dark skin tone, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, dark skin tone, light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fb': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fb', 'couple with heart: woman, woman, dark skin tone, light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, dark skin tone, medium-light skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fc': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fc', 'couple with heart: woman, woman, dark skin tone, medium-light skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, dark skin tone, medium skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fd': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fd', 'couple with heart: woman, woman, dark skin tone, medium skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, dark skin tone, medium-dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fe': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3fe', 'couple with heart: woman, woman, dark skin tone, medium-dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, dark skin tone', Status.FULLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3ff': EmojiRecord('\U0001f469\U0001f3ff\u200d\u2764\u200d\U0001f469\U0001f3ff', 'couple with heart: woman, woman, dark skin tone', Status.MINIMALLY_QUALIFIED, '13.1', '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f469\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f469\u200d\U0001f466', 'family: man, woman, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f469\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f469\u200d\U0001f467': EmojiRecord('\U0001f468\u200d\U0001f469\u200d\U0001f467', 'family: man, woman, girl', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f469\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466', 'family: man, woman, girl, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466', 'family: man, woman, boy, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467': EmojiRecord('\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467', 'family: man, woman, girl, girl', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f468\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f468\u200d\U0001f466', 'family: man, man, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f468\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f468\u200d\U0001f467': EmojiRecord('\U0001f468\u200d\U0001f468\u200d\U0001f467', 'family: man, man, girl', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f468\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f466', 'family: man, man, girl, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f468\u200d\U0001f466\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f468\u200d\U0001f466\u200d\U0001f466', 'family: man, man, boy, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f468\u200d\U0001f466\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f467': EmojiRecord('\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f467', 'family: man, man, girl, girl', Status.FULLY_QUALIFIED, '2.0', '\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f469\u200d\U0001f466': EmojiRecord('\U0001f469\u200d\U0001f469\u200d\U0001f466', 'family: woman, woman, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\U0001f469\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f469\u200d\U0001f467': EmojiRecord('\U0001f469\u200d\U0001f469\u200d\U0001f467', 'family: woman, woman, girl', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\U0001f469\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466': EmojiRecord('\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466', 'family: woman, woman, girl, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466': EmojiRecord('\U0001f469\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466', 'family: woman, woman, boy, boy', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467': EmojiRecord('\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467', 'family: woman, woman, girl, girl', Status.FULLY_QUALIFIED, '2.0', '\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f466', 'family: man, boy', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f466\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f466\u200d\U0001f466', 'family: man, boy, boy', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f466\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f467': EmojiRecord('\U0001f468\u200d\U0001f467', 'family: man, girl', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f467\u200d\U0001f466': EmojiRecord('\U0001f468\u200d\U0001f467\u200d\U0001f466', 'family: man, girl, boy', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f467\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f468\u200d\U0001f467\u200d\U0001f467': EmojiRecord('\U0001f468\u200d\U0001f467\u200d\U0001f467', 'family: man, girl, girl', Status.FULLY_QUALIFIED, '4.0', '\U0001f468\u200d\U0001f467\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f466': EmojiRecord('\U0001f469\u200d\U0001f466', 'family: woman, boy', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f466\u200d\U0001f466': EmojiRecord('\U0001f469\u200d\U0001f466\u200d\U0001f466', 'family: woman, boy, boy', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f466\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f467': EmojiRecord('\U0001f469\u200d\U0001f467', 'family: woman, girl', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f467\u200d\U0001f466': EmojiRecord('\U0001f469\u200d\U0001f467\u200d\U0001f466', 'family: woman, girl, boy', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f467\u200d\U0001f466', 'People & Body', 'family'),
    '\U0001f469\u200d\U0001f467\u200d\U0001f467': EmojiRecord('\U0001f469\u200d\U0001f467\u200d\U0001f467', 'family: woman, girl, girl', Status.FULLY_QUALIFIED, '4.0', '\U0001f469\u200d\U0001f467\u200d\U0001f467', 'People & Body', 'family'),
    '\U0001f5e3\ufe0f': EmojiRecord('\U0001f5e3\ufe0f', 'speaking head', Status.FULLY_QUALIFIED, '0.7', '\U0001f5e3\ufe0f', 'People & Body', 'person-symbol'),
    '\U0001f5e3': EmojiRecord('\U0001f5e3', 'speaking head', Status.UNQUALIFIED, '0.7', '\U0001f5e3\ufe0f', 'People & Body', 'person-symbol'),
    '\U0001f464': EmojiRecord('\U0001f464', 'bust in silhouette', Status.FULLY_QUALIFIED, '0.6', '\U0001f464', 'People & Body', 'person-symbol'),
    '\U0001f465': EmojiRecord('\U0001f465', 'busts in silhouette', Status.FULLY_QUALIFIED, '1.0', '\U0001f465', 'People & Body', 'person-symbol'),
    '\U0001fac2': EmojiRecord('\U0001fac2', 'people hugging', Status.FULLY_QUALIFIED, '13.0', '\U0001fac2', 'People & Body', 'person-symbol'),
    '\U0001f46a': EmojiRecord('\U0001f46a', 'family', Status.FULLY_QUALIFIED, '0.6', '\U0001f46a', 'People & Body', 'person-symbol'),
    '\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2': EmojiRecord('\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2', 'family: adult, adult, child', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2', 'People & Body', 'person-symbol'),
    '\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2': EmojiRecord('\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2', 'family: adult, adult, child, child', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2', 'People & Body', 'person-symbol'),
    '\U0001f9d1\u200d\U0001f9d2': EmojiRecord('\U0001f9d1\u200d\U0001f9d2', 'family: adult, child', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9d2', 'People & Body', 'person-symbol'),
    '\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2': EmojiRecord('\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2', 'family: adult, child, child', Status.FULLY_QUALIFIED, '15.1', '\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2', 'People & Body', 'person-symbol'),
    '\U0001f463': EmojiRecord('\U0001f463', 'footprints', Status.FULLY_QUALIFIED, '0.6', '\U0001f463', 'People & Body', 'person-symbol'),
    '\U0001f3fb': EmojiRecord('\U0001f3fb', 'light skin tone', Status.COMPONENT, '1.0', '', 'Component', 'skin-tone'),
    '\U0001f3fc': EmojiRecord('\U0001f3fc', 'medium-light skin tone', Status.COMPONENT, '1.0', '', 'Component', 'skin-tone'),
    '\U0001f3fd': EmojiRecord('\U0001f3fd', 'medium skin tone', Status.COMPONENT, '1.0', '', 'Component', 'skin-tone'),
    '\U0001f3fe': EmojiRecord('\U0001f3fe', 'medium-dark skin tone', Status.COMPONENT, '1.0', '', 'Component', 'skin-tone'),
    '\U0001f3ff': EmojiRecord('\U0001f3ff', 'dark skin tone', Status.COMPONENT, '1.0', '', 'Component', 'skin-tone'),
    '\U0001f9b0': EmojiRecord('\U0001f9b0', 'red hair', Status.COMPONENT, '11.0', '', 'Component', 'hair-style'),
    '\U0001f9b1': EmojiRecord('\U0001f9b1', 'curly hair', Status.COMPONENT, '11.0', '', 'Component', 'hair-style'),
    '\U0001f9b3': EmojiRecord('\U0001f9b3', 'white hair', Status.COMPONENT, '11.0', '', 'Component', 'hair-style'),
    '\U0001f9b2': EmojiRecord('\U0001f9b2', 'bald', Status.COMPONENT, '11.0', '', 'Component', 'hair-style'),
    '\U0001f435': EmojiRecord('\U0001f435', 'monkey face', Status.FULLY_QUALIFIED, '0.6', '\U0001f435', 'Animals & Nature', 'animal-mammal'),
    '\U0001f412': EmojiRecord('\U0001f412', 'monkey', Status.FULLY_QUALIFIED, '0.6', '\U0001f412', 'Animals & Nature', 'animal-mammal'),
    '\U0001f98d': EmojiRecord('\U0001f98d', 'gorilla', Status.FULLY_QUALIFIED, '3.0', '\U0001f98d', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9a7': EmojiRecord('\U0001f9a7', 'orangutan', Status.FULLY_QUALIFIED, '12.0', '\U0001f9a7', 'Animals & Nature', 'animal-mammal'),
    '\U0001f436': EmojiRecord('\U0001f436', 'dog face', Status.FULLY_QUALIFIED, '0.6', '\U0001f436', 'Animals & Nature', 'animal-mammal'),
    '\U0001f415': EmojiRecord('\U0001f415', 'dog', Status.FULLY_QUALIFIED, '0.7', '\U0001f415', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9ae': EmojiRecord('\U0001f9ae', 'guide dog', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ae', 'Animals & Nature', 'animal-mammal'),
    '\U0001f415\u200d\U0001f9ba': EmojiRecord('\U0001f415\u200d\U0001f9ba', 'service dog', Status.FULLY_QUALIFIED, '12.0', '\U0001f415\u200d\U0001f9ba', 'Animals & Nature', 'animal-mammal'),
    '\U0001f429': EmojiRecord('\U0001f429', 'poodle', Status.FULLY_QUALIFIED, '0.6', '\U0001f429', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43a': EmojiRecord('\U0001f43a', 'wolf', Status.FULLY_QUALIFIED, '0.6', '\U0001f43a', 'Animals & Nature', 'animal-mammal'),
    '\U0001f98a': EmojiRecord('\U0001f98a', 'fox', Status.FULLY_QUALIFIED, '3.0', '\U0001f98a', 'Animals & Nature', 'animal-mammal'),
    '\U0001f99d': EmojiRecord('\U0001f99d', 'raccoon', Status.FULLY_QUALIFIED, '11.0', '\U0001f99d', 'Animals & Nature', 'animal-mammal'),
    '\U0001f431': EmojiRecord('\U0001f431', 'cat face', Status.FULLY_QUALIFIED, '0.6', '\U0001f431', 'Animals & Nature', 'animal-mammal'),
    '\U0001f408': EmojiRecord('\U0001f408', 'cat', Status.FULLY_QUALIFIED, '0.7', '\U0001f408', 'Animals & Nature', 'animal-mammal'),
    '\U0001f408\u200d\u2b1b': EmojiRecord('\U0001f408\u200d\u2b1b', 'black cat', Status.FULLY_QUALIFIED, '13.0', '\U0001f408\u200d\u2b1b', 'Animals & Nature', 'animal-mammal'),
    '\U0001f981': EmojiRecord('\U0001f981', 'lion', Status.FULLY_QUALIFIED, '1.0', '\U0001f981', 'Animals & Nature', 'animal-mammal'),
    '\U0001f42f': EmojiRecord('\U0001f42f', 'tiger face', Status.FULLY_QUALIFIED, '0.6', '\U0001f42f', 'Animals & Nature', 'animal-mammal'),
    '\U0001f405': EmojiRecord('\U0001f405', 'tiger', Status.FULLY_QUALIFIED, '1.0', '\U0001f405', 'Animals & Nature', 'animal-mammal'),
    '\U0001f406': EmojiRecord('\U0001f406', 'leopard', Status.FULLY_QUALIFIED, '1.0', '\U0001f406', 'Animals & Nature', 'animal-mammal'),
    '\U0001f434': EmojiRecord('\U0001f434', 'horse face', Status.FULLY_QUALIFIED, '0.6', '\U0001f434', 'Animals & Nature', 'animal-mammal'),
    '\U0001face': EmojiRecord('\U0001face', 'moose', Status.FULLY_QUALIFIED, '15.0', '\U0001face', 'Animals & Nature', 'animal-mammal'),
    '\U0001facf': EmojiRecord('\U0001facf', 'donkey', Status.FULLY_QUALIFIED, '15.0', '\U0001facf', 'Animals & Nature', 'animal-mammal'),
    '\U0001f40e': EmojiRecord('\U0001f40e', 'horse', Status.FULLY_QUALIFIED, '0.6', '\U0001f40e', 'Animals & Nature', 'animal-mammal'),
    '\U0001f984': EmojiRecord('\U0001f984', 'unicorn', Status.FULLY_QUALIFIED, '1.0', '\U0001f984', 'Animals & Nature', 'animal-mammal'),
    '\U0001f993': EmojiRecord('\U0001f993', 'zebra', Status.FULLY_QUALIFIED, '5.0', '\U0001f993', 'Animals & Nature', 'animal-mammal'),
    '\U0001f98c': EmojiRecord('\U0001f98c', 'deer', Status.FULLY_QUALIFIED, '3.0', '\U0001f98c', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9ac': EmojiRecord('\U0001f9ac', 'bison', Status.FULLY_QUALIFIED, '13.0', '\U0001f9ac', 'Animals & Nature', 'animal-mammal'),
    '\U0001f42e': EmojiRecord('\U0001f42e', 'cow face', Status.FULLY_QUALIFIED, '0.6', '\U0001f42e', 'Animals & Nature', 'animal-mammal'),
    '\U0001f402': EmojiRecord('\U0001f402', 'ox', Status.FULLY_QUALIFIED, '1.0', '\U0001f402', 'Animals & Nature', 'animal-mammal'),
    '\U0001f403': EmojiRecord('\U0001f403', 'water buffalo', Status.FULLY_QUALIFIED, '1.0', '\U0001f403', 'Animals & Nature', 'animal-mammal'),
    '\U0001f404': EmojiRecord('\U0001f404', 'cow', Status.FULLY_QUALIFIED, '1.0', '\U0001f404', 'Animals & Nature', 'animal-mammal'),
    '\U0001f437': EmojiRecord('\U0001f437', 'pig face', Status.FULLY_QUALIFIED, '0.6', '\U0001f437', 'Animals & Nature', 'animal-mammal'),
    '\U0001f416': EmojiRecord('\U0001f416', 'pig', Status.FULLY_QUALIFIED, '1.0', '\U0001f416', 'Animals & Nature', 'animal-mammal'),
    '\U0001f417': EmojiRecord('\U0001f417', 'boar', Status.FULLY_QUALIFIED, '0.6', '\U0001f417', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43d': EmojiRecord('\U0001f43d', 'pig nose', Status.FULLY_QUALIFIED, '0.6', '\U0001f43d', 'Animals & Nature', 'animal-mammal'),
    '\U0001f40f': EmojiRecord('\U0001f40f', 'ram', Status.FULLY_QUALIFIED, '1.0', '\U0001f40f', 'Animals & Nature', 'animal-mammal'),
    '\U0001f411': EmojiRecord('\U0001f411', 'ewe', Status.FULLY_QUALIFIED, '0.6', '\U0001f411', 'Animals & Nature', 'animal-mammal'),
    '\U0001f410': EmojiRecord('\U0001f410', 'goat', Status.FULLY_QUALIFIED, '1.0', '\U0001f410', 'Animals & Nature', 'animal-mammal'),
    '\U0001f42a': EmojiRecord('\U0001f42a', 'camel', Status.FULLY_QUALIFIED, '1.0', '\U0001f42a', 'Animals & Nature', 'animal-mammal'),
    '\U0001f42b': EmojiRecord('\U0001f42b', 'two-hump camel', Status.FULLY_QUALIFIED, '0.6', '\U0001f42b', 'Animals & Nature', 'animal-mammal'),
    '\U0001f999': EmojiRecord('\U0001f999', 'llama', Status.FULLY_QUALIFIED, '11.0', '\U0001f999', 'Animals & Nature', 'animal-mammal'),
    '\U0001f992': EmojiRecord('\U0001f992', 'giraffe', Status.FULLY_QUALIFIED, '5.0', '\U0001f992', 'Animals & Nature', 'animal-mammal'),
    '\U0001f418': EmojiRecord('\U0001f418', 'elephant', Status.FULLY_QUALIFIED, '0.6', '\U0001f418', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9a3': EmojiRecord('\U0001f9a3', 'mammoth', Status.FULLY_QUALIFIED, '13.0', '\U0001f9a3', 'Animals & Nature', 'animal-mammal'),
    '\U0001f98f': EmojiRecord('\U0001f98f', 'rhinoceros', Status.FULLY_QUALIFIED, '3.0', '\U0001f98f', 'Animals & Nature', 'animal-mammal'),
    '\U0001f99b': EmojiRecord('\U0001f99b', 'hippopotamus', Status.FULLY_QUALIFIED, '11.0', '\U0001f99b', 'Animals & Nature', 'animal-mammal'),
    '\U0001f42d': EmojiRecord('\U0001f42d', 'mouse face', Status.FULLY_QUALIFIED, '0.6', '\U0001f42d', 'Animals & Nature', 'animal-mammal'),
    '\U0001f401': EmojiRecord('\U0001f401', 'mouse', Status.FULLY_QUALIFIED, '1.0', '\U0001f401', 'Animals & Nature', 'animal-mammal'),
    '\U0001f400': EmojiRecord('\U0001f400', 'rat', Status.FULLY_QUALIFIED, '1.0', '\U0001f400', 'Animals & Nature', 'animal-mammal'),
    '\U0001f439': EmojiRecord('\U0001f439', 'hamster', Status.FULLY_QUALIFIED, '0.6', '\U0001f439', 'Animals & Nature', 'animal-mammal'),
    '\U0001f430': EmojiRecord('\U0001f430', 'rabbit face', Status.FULLY_QUALIFIED, '0.6', '\U0001f430', 'Animals & Nature', 'animal-mammal'),
    '\U0001f407': EmojiRecord('\U0001f407', 'rabbit', Status.FULLY_QUALIFIED, '1.0', '\U0001f407', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43f\ufe0f': EmojiRecord('\U0001f43f\ufe0f', 'chipmunk', Status.FULLY_QUALIFIED, '0.7', '\U0001f43f\ufe0f', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43f': EmojiRecord('\U0001f43f', 'chipmunk', Status.UNQUALIFIED, '0.7', '\U0001f43f\ufe0f', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9ab': EmojiRecord('\U0001f9ab', 'beaver', Status.FULLY_QUALIFIED, '13.0', '\U0001f9ab', 'Animals & Nature', 'animal-mammal'),
    '\U0001f994': EmojiRecord('\U0001f994', 'hedgehog', Status.FULLY_QUALIFIED, '5.0', '\U0001f994', 'Animals & Nature', 'animal-mammal'),
    '\U0001f987': EmojiRecord('\U0001f987', 'bat', Status.FULLY_QUALIFIED, '3.0', '\U0001f987', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43b': EmojiRecord('\U0001f43b', 'bear', Status.FULLY_QUALIFIED, '0.6', '\U0001f43b', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43b\u200d\u2744\ufe0f': EmojiRecord('\U0001f43b\u200d\u2744\ufe0f', 'polar bear', Status.FULLY_QUALIFIED, '13.0', '\U0001f43b\u200d\u2744\ufe0f', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43b\u200d\u2744': EmojiRecord('\U0001f43b\u200d\u2744', 'polar bear', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f43b\u200d\u2744\ufe0f', 'Animals & Nature', 'animal-mammal'),
    '\U0001f428': EmojiRecord('\U0001f428', 'koala', Status.FULLY_QUALIFIED, '0.6', '\U0001f428', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43c': EmojiRecord('\U0001f43c', 'panda', Status.FULLY_QUALIFIED, '0.6', '\U0001f43c', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9a5': EmojiRecord('\U0001f9a5', 'sloth', Status.FULLY_QUALIFIED, '12.0', '\U0001f9a5', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9a6': EmojiRecord('\U0001f9a6', 'otter', Status.FULLY_QUALIFIED, '12.0', '\U0001f9a6', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9a8': EmojiRecord('\U0001f9a8', 'skunk', Status.FULLY_QUALIFIED, '12.0', '\U0001f9a8', 'Animals & Nature', 'animal-mammal'),
    '\U0001f998': EmojiRecord('\U0001f998', 'kangaroo', Status.FULLY_QUALIFIED, '11.0', '\U0001f998', 'Animals & Nature', 'animal-mammal'),
    '\U0001f9a1': EmojiRecord('\U0001f9a1', 'badger', Status.FULLY_QUALIFIED, '11.0', '\U0001f9a1', 'Animals & Nature', 'animal-mammal'),
    '\U0001f43e': EmojiRecord('\U0001f43e', 'paw prints', Status.FULLY_QUALIFIED, '0.6', '\U0001f43e', 'Animals & Nature', 'animal-mammal'),
    '\U0001f983': EmojiRecord('\U0001f983', 'turkey', Status.FULLY_QUALIFIED, '1.0', '\U0001f983', 'Animals & Nature', 'animal-bird'),
    '\U0001f414': EmojiRecord('\U0001f414', 'chicken', Status.FULLY_QUALIFIED, '0.6', '\U0001f414', 'Animals & Nature', 'animal-bird'),
    '\U0001f413': EmojiRecord('\U0001f413', 'rooster', Status.FULLY_QUALIFIED, '1.0', '\U0001f413', 'Animals & Nature', 'animal-bird'),
    '\U0001f423': EmojiRecord('\U0001f423', 'hatching chick', Status.FULLY_QUALIFIED, '0.6', '\U0001f423', 'Animals & Nature', 'animal-bird'),
    '\U0001f424': EmojiRecord('\U0001f424', 'baby chick', Status.FULLY_QUALIFIED, '0.6', '\U0001f424', 'Animals & Nature', 'animal-bird'),
    '\U0001f425': EmojiRecord('\U0001f425', 'front-facing baby chick', Status.FULLY_QUALIFIED, '0.6', '\U0001f425', 'Animals & Nature', 'animal-bird'),
    '\U0001f426': EmojiRecord('\U0001f426', 'bird', Status.FULLY_QUALIFIED, '0.6', '\U0001f426', 'Animals & Nature', 'animal-bird'),
    '\U0001f427': EmojiRecord('\U0001f427', 'penguin', Status.FULLY_QUALIFIED, '0.6', '\U0001f427', 'Animals & Nature', 'animal-bird'),
    '\U0001f54a\ufe0f': EmojiRecord('\U0001f54a\ufe0f', 'dove', Status.FULLY_QUALIFIED, '0.7', '\U0001f54a\ufe0f', 'Animals & Nature', 'animal-bird'),
    '\U0001f54a': EmojiRecord('\U0001f54a', 'dove', Status.UNQUALIFIED, '0.7', '\U0001f54a\ufe0f', 'Animals & Nature', 'animal-bird'),
    '\U0001f985': EmojiRecord('\U0001f985', 'eagle', Status.FULLY_QUALIFIED, '3.0', '\U0001f985', 'Animals & Nature', 'animal-bird'),
    '\U0001f986': EmojiRecord('\U0001f986', 'duck', Status.FULLY_QUALIFIED, '3.0', '\U0001f986', 'Animals & Nature', 'animal-bird'),
    '\U0001f9a2': EmojiRecord('\U0001f9a2', 'swan', Status.FULLY_QUALIFIED, '11.0', '\U0001f9a2', 'Animals & Nature', 'animal-bird'),
    '\U0001f989': EmojiRecord('\U0001f989', 'owl', Status.FULLY_QUALIFIED, '3.0', '\U0001f989', 'Animals & Nature', 'animal-bird'),
    '\U0001f9a4': EmojiRecord('\U0001f9a4', 'dodo', Status.FULLY_QUALIFIED, '13.0', '\U0001f9a4', 'Animals & Nature', 'animal-bird'),
    '\U0001fab6': EmojiRecord('\U0001fab6', 'feather', Status.FULLY_QUALIFIED, '13.0', '\U0001fab6', 'Animals & Nature', 'animal-bird'),
    '\U0001f9a9': EmojiRecord('\U0001f9a9', 'flamingo', Status.FULLY_QUALIFIED, '12.0', '\U0001f9a9', 'Animals & Nature', 'animal-bird'),
    '\U0001f99a': EmojiRecord('\U0001f99a', 'peacock', Status.FULLY_QUALIFIED, '11.0', '\U0001f99a', 'Animals & Nature', 'animal-bird'),
    '\U0001f99c': EmojiRecord('\U0001f99c', 'parrot', Status.FULLY_QUALIFIED, '11.0', '\U0001f99c', 'Animals & Nature', 'animal-bird'),
    '\U0001fabd': EmojiRecord('\U0001fabd', 'wing', Status.FULLY_QUALIFIED, '15.0', '\U0001fabd', 'Animals & Nature', 'animal-bird'),
    '\U0001f426\u200d\u2b1b': EmojiRecord('\U0001f426\u200d\u2b1b', 'black bird', Status.FULLY_QUALIFIED, '15.0', '\U0001f426\u200d\u2b1b', 'Animals & Nature', 'animal-bird'),
    '\U0001fabf': EmojiRecord('\U0001fabf', 'goose', Status.FULLY_QUALIFIED, '15.0', '\U0001fabf', 'Animals & Nature', 'animal-bird'),
    '\U0001f426\u200d\U0001f525': EmojiRecord('\U0001f426\u200d\U0001f525', 'phoenix', Status.FULLY_QUALIFIED, '15.1', '\U0001f426\u200d\U0001f525', 'Animals & Nature', 'animal-bird'),
    '\U0001f438': EmojiRecord('\U0001f438', 'frog', Status.FULLY_QUALIFIED, '0.6', '\U0001f438', 'Animals & Nature', 'animal-amphibian'),
    '\U0001f40a': EmojiRecord('\U0001f40a', 'crocodile', Status.FULLY_QUALIFIED, '1.0', '\U0001f40a', 'Animals & Nature', 'animal-reptile'),
    '\U0001f422': EmojiRecord('\U0001f422', 'turtle', Status.FULLY_QUALIFIED, '0.6', '\U0001f422', 'Animals & Nature', 'animal-reptile'),
    '\U0001f98e': EmojiRecord('\U0001f98e', 'lizard', Status.FULLY_QUALIFIED, '3.0', '\U0001f98e', 'Animals & Nature', 'animal-reptile'),
    '\U0001f40d': EmojiRecord('\U0001f40d', 'snake', Status.FULLY_QUALIFIED, '0.6', '\U0001f40d', 'Animals & Nature', 'animal-reptile'),
    '\U0001f432': EmojiRecord('\U0001f432', 'dragon face', Status.FULLY_QUALIFIED, '0.6', '\U0001f432', 'Animals & Nature', 'animal-reptile'),
    '\U0001f409': EmojiRecord('\U0001f409', 'dragon', Status.FULLY_QUALIFIED, '1.0', '\U0001f409', 'Animals & Nature', 'animal-reptile'),
    '\U0001f995': EmojiRecord('\U0001f995', 'sauropod', Status.FULLY_QUALIFIED, '5.0', '\U0001f995', 'Animals & Nature', 'animal-reptile'),
    '\U0001f996': EmojiRecord('\U0001f996', 'T-Rex', Status.FULLY_QUALIFIED, '5.0', '\U0001f996', 'Animals & Nature', 'animal-reptile'),
    '\U0001f433': EmojiRecord('\U0001f433', 'spouting whale', Status.FULLY_QUALIFIED, '0.6', '\U0001f433', 'Animals & Nature', 'animal-marine'),
    '\U0001f40b': EmojiRecord('\U0001f40b', 'whale', Status.FULLY_QUALIFIED, '1.0', '\U0001f40b', 'Animals & Nature', 'animal-marine'),
    '\U0001f42c': EmojiRecord('\U0001f42c', 'dolphin', Status.FULLY_QUALIFIED, '0.6', '\U0001f42c', 'Animals & Nature', 'animal-marine'),
    '\U0001f9ad': EmojiRecord('\U0001f9ad', 'seal', Status.FULLY_QUALIFIED, '13.0', '\U0001f9ad', 'Animals & Nature', 'animal-marine'),
    '\U0001f41f': EmojiRecord('\U0001f41f', 'fish', Status.FULLY_QUALIFIED, '0.6', '\U0001f41f', 'Animals & Nature', 'animal-marine'),
    '\U0001f420': EmojiRecord('\U0001f420', 'tropical fish', Status.FULLY_QUALIFIED, '0.6', '\U0001f420', 'Animals & Nature', 'animal-marine'),
    '\U0001f421': EmojiRecord('\U0001f421', 'blowfish', Status.FULLY_QUALIFIED, '0.6', '\U0001f421', 'Animals & Nature', 'animal-marine'),
    '\U0001f988': EmojiRecord('\U0001f988', 'shark', Status.FULLY_QUALIFIED, '3.0', '\U0001f988', 'Animals & Nature', 'animal-marine'),
    '\U0001f419': EmojiRecord('\U0001f419', 'octopus', Status.FULLY_QUALIFIED, '0.6', '\U0001f419', 'Animals & Nature', 'animal-marine'),
    '\U0001f41a': EmojiRecord('\U0001f41a', 'spiral shell', Status.FULLY_QUALIFIED, '0.6', '\U0001f41a', 'Animals & Nature', 'animal-marine'),
    '\U0001fab8': EmojiRecord('\U0001fab8', 'coral', Status.FULLY_QUALIFIED, '14.0', '\U0001fab8', 'Animals & Nature', 'animal-marine'),
    '\U0001fabc': EmojiRecord('\U0001fabc', 'jellyfish', Status.FULLY_QUALIFIED, '15.0', '\U0001fabc', 'Animals & Nature', 'animal-marine'),
    '\U0001f40c': EmojiRecord('\U0001f40c', 'snail', Status.FULLY_QUALIFIED, '0.6', '\U0001f40c', 'Animals & Nature', 'animal-bug'),
    '\U0001f98b': EmojiRecord('\U0001f98b', 'butterfly', Status.FULLY_QUALIFIED, '3.0', '\U0001f98b', 'Animals & Nature', 'animal-bug'),
    '\U0001f41b': EmojiRecord('\U0001f41b', 'bug', Status.FULLY_QUALIFIED, '0.6', '\U0001f41b', 'Animals & Nature', 'animal-bug'),
    '\U0001f41c': EmojiRecord('\U0001f41c', 'ant', Status.FULLY_QUALIFIED, '0.6', '\U0001f41c', 'Animals & Nature', 'animal-bug'),
    '\U0001f41d': EmojiRecord('\U0001f41d', 'honeybee', Status.FULLY_QUALIFIED, '0.6', '\U0001f41d', 'Animals & Nature', 'animal-bug'),
    '\U0001fab2': EmojiRecord('\U0001fab2', 'beetle', Status.FULLY_QUALIFIED, '13.0', '\U0001fab2', 'Animals & Nature', 'animal-bug'),
    '\U0001f41e': EmojiRecord('\U0001f41e', 'lady beetle', Status.FULLY_QUALIFIED, '0.6', '\U0001f41e', 'Animals & Nature', 'animal-bug'),
    '\U0001f997': EmojiRecord('\U0001f997', 'cricket', Status.FULLY_QUALIFIED, '5.0', '\U0001f997', 'Animals & Nature', 'animal-bug'),
    '\U0001fab3': EmojiRecord('\U0001fab3', 'cockroach', Status.FULLY_QUALIFIED, '13.0', '\U0001fab3', 'Animals & Nature', 'animal-bug'),
    '\U0001f577\ufe0f': EmojiRecord('\U0001f577\ufe0f', 'spider', Status.FULLY_QUALIFIED, '0.7', '\U0001f577\ufe0f', 'Animals & Nature', 'animal-bug'),
    '\U0001f577': EmojiRecord('\U0001f577', 'spider', Status.UNQUALIFIED, '0.7', '\U0001f577\ufe0f', 'Animals & Nature', 'animal-bug'),
    '\U0001f578\ufe0f': EmojiRecord('\U0001f578\ufe0f', 'spider web', Status.FULLY_QUALIFIED, '0.7', '\U0001f578\ufe0f', 'Animals & Nature', 'animal-bug'),
    '\U0001f578': EmojiRecord('\U0001f578', 'spider web', Status.UNQUALIFIED, '0.7', '\U0001f578\ufe0f', 'Animals & Nature', 'animal-bug'),
    '\U0001f982': EmojiRecord('\U0001f982', 'scorpion', Status.FULLY_QUALIFIED, '1.0', '\U0001f982', 'Animals & Nature', 'animal-bug'),
    '\U0001f99f': EmojiRecord('\U0001f99f', 'mosquito', Status.FULLY_QUALIFIED, '11.0', '\U0001f99f', 'Animals & Nature', 'animal-bug'),
    '\U0001fab0': EmojiRecord('\U0001fab0', 'fly', Status.FULLY_QUALIFIED, '13.0', '\U0001fab0', 'Animals & Nature', 'animal-bug'),
    '\U0001fab1': EmojiRecord('\U0001fab1', 'worm', Status.FULLY_QUALIFIED, '13.0', '\U0001fab1', 'Animals & Nature', 'animal-bug'),
    '\U0001f9a0': EmojiRecord('\U0001f9a0', 'microbe', Status.FULLY_QUALIFIED, '11.0', '\U0001f9a0', 'Animals & Nature', 'animal-bug'),
    '\U0001f490': EmojiRecord('\U0001f490', 'bouquet', Status.FULLY_QUALIFIED, '0.6', '\U0001f490', 'Animals & Nature', 'plant-flower'),
    '\U0001f338': EmojiRecord('\U0001f338', 'cherry blossom', Status.FULLY_QUALIFIED, '0.6', '\U0001f338', 'Animals & Nature', 'plant-flower'),
    '\U0001f4ae': EmojiRecord('\U0001f4ae', 'white flower', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ae', 'Animals & Nature', 'plant-flower'),
    '\U0001fab7': EmojiRecord('\U0001fab7', 'lotus', Status.FULLY_QUALIFIED, '14.0', '\U0001fab7', 'Animals & Nature', 'plant-flower'),
    '\U0001f3f5\ufe0f': EmojiRecord('\U0001f3f5\ufe0f', 'rosette', Status.FULLY_QUALIFIED, '0.7', '\U0001f3f5\ufe0f', 'Animals & Nature', 'plant-flower'),
    '\U0001f3f5': EmojiRecord('\U0001f3f5', 'rosette', Status.UNQUALIFIED, '0.7', '\U0001f3f5\ufe0f', 'Animals & Nature', 'plant-flower'),
    '\U0001f339': EmojiRecord('\U0001f339', 'rose', Status.FULLY_QUALIFIED, '0.6', '\U0001f339', 'Animals & Nature', 'plant-flower'),
    '\U0001f940': EmojiRecord('\U0001f940', 'wilted flower', Status.FULLY_QUALIFIED, '3.0', '\U0001f940', 'Animals & Nature', 'plant-flower'),
    '\U0001f33a': EmojiRecord('\U0001f33a', 'hibiscus', Status.FULLY_QUALIFIED, '0.6', '\U0001f33a', 'Animals & Nature', 'plant-flower'),
    '\U0001f33b': EmojiRecord('\U0001f33b', 'sunflower', Status.FULLY_QUALIFIED, '0.6', '\U0001f33b', 'Animals & Nature', 'plant-flower'),
    '\U0001f33c': EmojiRecord('\U0001f33c', 'blossom', Status.FULLY_QUALIFIED, '0.6', '\U0001f33c', 'Animals & Nature', 'plant-flower'),
    '\U0001f337': EmojiRecord('\U0001f337', 'tulip', Status.FULLY_QUALIFIED, '0.6', '\U0001f337', 'Animals & Nature', 'plant-flower'),
    '\U0001fabb': EmojiRecord('\U0001fabb', 'hyacinth', Status.FULLY_QUALIFIED, '15.0', '\U0001fabb', 'Animals & Nature', 'plant-flower'),
    '\U0001f331': EmojiRecord('\U0001f331', 'seedling', Status.FULLY_QUALIFIED, '0.6', '\U0001f331', 'Animals & Nature', 'plant-other'),
    '\U0001fab4': EmojiRecord('\U0001fab4', 'potted plant', Status.FULLY_QUALIFIED, '13.0', '\U0001fab4', 'Animals & Nature', 'plant-other'),
    '\U0001f332': EmojiRecord('\U0001f332', 'evergreen tree', Status.FULLY_QUALIFIED, '1.0', '\U0001f332', 'Animals & Nature', 'plant-other'),
    '\U0001f333': EmojiRecord('\U0001f333', 'deciduous tree', Status.FULLY_QUALIFIED, '1.0', '\U0001f333', 'Animals & Nature', 'plant-other'),
    '\U0001f334': EmojiRecord('\U0001f334', 'palm tree', Status.FULLY_QUALIFIED, '0.6', '\U0001f334', 'Animals & Nature', 'plant-other'),
    '\U0001f335': EmojiRecord('\U0001f335', 'cactus', Status.FULLY_QUALIFIED, '0.6', '\U0001f335', 'Animals & Nature', 'plant-other'),
    '\U0001f33e': EmojiRecord('\U0001f33e', 'sheaf of rice', Status.FULLY_QUALIFIED, '0.6', '\U0001f33e', 'Animals & Nature', 'plant-other'),
    '\U0001f33f': EmojiRecord('\U0001f33f', 'herb', Status.FULLY_QUALIFIED, '0.6', '\U0001f33f', 'Animals & Nature', 'plant-other'),
    '\u2618\ufe0f': EmojiRecord('\u2618\ufe0f', 'shamrock', Status.FULLY_QUALIFIED, '1.0', '\u2618\ufe0f', 'Animals & Nature', 'plant-other'),
    '\u2618': EmojiRecord('\u2618', 'shamrock', Status.UNQUALIFIED, '1.0', '\u2618\ufe0f', 'Animals & Nature', 'plant-other'),
    '\U0001f340': EmojiRecord('\U0001f340', 'four leaf clover', Status.FULLY_QUALIFIED, '0.6', '\U0001f340', 'Animals & Nature', 'plant-other'),
    '\U0001f341': EmojiRecord('\U0001f341', 'maple leaf', Status.FULLY_QUALIFIED, '0.6', '\U0001f341', 'Animals & Nature', 'plant-other'),
    '\U0001f342': EmojiRecord('\U0001f342', 'fallen leaf', Status.FULLY_QUALIFIED, '0.6', '\U0001f342', 'Animals & Nature', 'plant-other'),
    '\U0001f343': EmojiRecord('\U0001f343', 'leaf fluttering in wind', Status.FULLY_QUALIFIED, '0.6', '\U0001f343', 'Animals & Nature', 'plant-other'),
    '\U0001fab9': EmojiRecord('\U0001fab9', 'empty nest', Status.FULLY_QUALIFIED, '14.0', '\U0001fab9', 'Animals & Nature', 'plant-other'),
    '\U0001faba': EmojiRecord('\U0001faba', 'nest with eggs', Status.FULLY_QUALIFIED, '14.0', '\U0001faba', 'Animals & Nature', 'plant-other'),
    '\U0001f344': EmojiRecord('\U0001f344', 'mushroom', Status.FULLY_QUALIFIED, '0.6', '\U0001f344', 'Animals & Nature', 'plant-other'),
    '\U0001f347': EmojiRecord('\U0001f347', 'grapes', Status.FULLY_QUALIFIED, '0.6', '\U0001f347', 'Food & Drink', 'food-fruit'),
    '\U0001f348': EmojiRecord('\U0001f348', 'melon', Status.FULLY_QUALIFIED, '0.6', '\U0001f348', 'Food & Drink', 'food-fruit'),
    '\U0001f349': EmojiRecord('\U0001f349', 'watermelon', Status.FULLY_QUALIFIED, '0.6', '\U0001f349', 'Food & Drink', 'food-fruit'),
    '\U0001f34a': EmojiRecord('\U0001f34a', 'tangerine', Status.FULLY_QUALIFIED, '0.6', '\U0001f34a', 'Food & Drink', 'food-fruit'),
    '\U0001f34b': EmojiRecord('\U0001f34b', 'lemon', Status.FULLY_QUALIFIED, '1.0', '\U0001f34b', 'Food & Drink', 'food-fruit'),
    '\U0001f34b\u200d\U0001f7e9': EmojiRecord('\U0001f34b\u200d\U0001f7e9', 'lime', Status.FULLY_QUALIFIED, '15.1', '\U0001f34b\u200d\U0001f7e9', 'Food & Drink', 'food-fruit'),
    '\U0001f34c': EmojiRecord('\U0001f34c', 'banana', Status.FULLY_QUALIFIED, '0.6', '\U0001f34c', 'Food & Drink', 'food-fruit'),
    '\U0001f34d': EmojiRecord('\U0001f34d', 'pineapple', Status.FULLY_QUALIFIED, '0.6', '\U0001f34d', 'Food & Drink', 'food-fruit'),
    '\U0001f96d': EmojiRecord('\U0001f96d', 'mango', Status.FULLY_QUALIFIED, '11.0', '\U0001f96d', 'Food & Drink', 'food-fruit'),
    '\U0001f34e': EmojiRecord('\U0001f34e', 'red apple', Status.FULLY_QUALIFIED, '0.6', '\U0001f34e', 'Food & Drink', 'food-fruit'),
    '\U0001f34f': EmojiRecord('\U0001f34f', 'green apple', Status.FULLY_QUALIFIED, '0.6', '\U0001f34f', 'Food & Drink', 'food-fruit'),
    '\U0001f350': EmojiRecord('\U0001f350', 'pear', Status.FULLY_QUALIFIED, '1.0', '\U0001f350', 'Food & Drink', 'food-fruit'),
    '\U0001f351': EmojiRecord('\U0001f351', 'peach', Status.FULLY_QUALIFIED, '0.6', '\U0001f351', 'Food & Drink', 'food-fruit'),
    '\U0001f352': EmojiRecord('\U0001f352', 'cherries', Status.FULLY_QUALIFIED, '0.6', '\U0001f352', 'Food & Drink', 'food-fruit'),
    '\U0001f353': EmojiRecord('\U0001f353', 'strawberry', Status.FULLY_QUALIFIED, '0.6', '\U0001f353', 'Food & Drink', 'food-fruit'),
    '\U0001fad0': EmojiRecord('\U0001fad0', 'blueberries', Status.FULLY_QUALIFIED, '13.0', '\U0001fad0', 'Food & Drink', 'food-fruit'),
    '\U0001f95d': EmojiRecord('\U0001f95d', 'kiwi fruit', Status.FULLY_QUALIFIED, '3.0', '\U0001f95d', 'Food & Drink', 'food-fruit'),
    '\U0001f345': EmojiRecord('\U0001f345', 'tomato', Status.FULLY_QUALIFIED, '0.6', '\U0001f345', 'Food & Drink', 'food-fruit'),
    '\U0001fad2': EmojiRecord('\U0001fad2', 'olive', Status.FULLY_QUALIFIED, '13.0', '\U0001fad2', 'Food & Drink', 'food-fruit'),
    '\U0001f965': EmojiRecord('\U0001f965', 'coconut', Status.FULLY_QUALIFIED, '5.0', '\U0001f965', 'Food & Drink', 'food-fruit'),
    '\U0001f951': EmojiRecord('\U0001f951', 'avocado', Status.FULLY_QUALIFIED, '3.0', '\U0001f951', 'Food & Drink', 'food-vegetable'),
    '\U0001f346': EmojiRecord('\U0001f346', 'eggplant', Status.FULLY_QUALIFIED, '0.6', '\U0001f346', 'Food & Drink', 'food-vegetable'),
    '\U0001f954': EmojiRecord('\U0001f954', 'potato', Status.FULLY_QUALIFIED, '3.0', '\U0001f954', 'Food & Drink', 'food-vegetable'),
    '\U0001f955': EmojiRecord('\U0001f955', 'carrot', Status.FULLY_QUALIFIED, '3.0', '\U0001f955', 'Food & Drink', 'food-vegetable'),
    '\U0001f33d': EmojiRecord('\U0001f33d', 'ear of corn', Status.FULLY_QUALIFIED, '0.6', '\U0001f33d', 'Food & Drink', 'food-vegetable'),
    '\U0001f336\ufe0f': EmojiRecord('\U0001f336\ufe0f', 'hot pepper', Status.FULLY_QUALIFIED, '0.7', '\U0001f336\ufe0f', 'Food & Drink', 'food-vegetable'),
    '\U0001f336': EmojiRecord('\U0001f336', 'hot pepper', Status.UNQUALIFIED, '0.7', '\U0001f336\ufe0f', 'Food & Drink', 'food-vegetable'),
    '\U0001fad1': EmojiRecord('\U0001fad1', 'bell pepper', Status.FULLY_QUALIFIED, '13.0', '\U0001fad1', 'Food & Drink', 'food-vegetable'),
    '\U0001f952': EmojiRecord('\U0001f952', 'cucumber', Status.FULLY_QUALIFIED, '3.0', '\U0001f952', 'Food & Drink', 'food-vegetable'),
    '\U0001f96c': EmojiRecord('\U0001f96c', 'leafy green', Status.FULLY_QUALIFIED, '11.0', '\U0001f96c', 'Food & Drink', 'food-vegetable'),
    '\U0001f966': EmojiRecord('\U0001f966', 'broccoli', Status.FULLY_QUALIFIED, '5.0', '\U0001f966', 'Food & Drink', 'food-vegetable'),
    '\U0001f9c4': EmojiRecord('\U0001f9c4', 'garlic', Status.FULLY_QUALIFIED, '12.0', '\U0001f9c4', 'Food & Drink', 'food-vegetable'),
    '\U0001f9c5': EmojiRecord('\U0001f9c5', 'onion', Status.FULLY_QUALIFIED, '12.0', '\U0001f9c5', 'Food & Drink', 'food-vegetable'),
    '\U0001f95c': EmojiRecord('\U0001f95c', 'peanuts', Status.FULLY_QUALIFIED, '3.0', '\U0001f95c', 'Food & Drink', 'food-vegetable'),
    '\U0001fad8': EmojiRecord('\U0001fad8', 'beans', Status.FULLY_QUALIFIED, '14.0', '\U0001fad8', 'Food & Drink', 'food-vegetable'),
    '\U0001f330': EmojiRecord('\U0001f330', 'chestnut', Status.FULLY_QUALIFIED, '0.6', '\U0001f330', 'Food & Drink', 'food-vegetable'),
    '\U0001fada': EmojiRecord('\U0001fada', 'ginger root', Status.FULLY_QUALIFIED, '15.0', '\U0001fada', 'Food & Drink', 'food-vegetable'),
    '\U0001fadb': EmojiRecord('\U0001fadb', 'pea pod', Status.FULLY_QUALIFIED, '15.0', '\U0001fadb', 'Food & Drink', 'food-vegetable'),
    '\U0001f344\u200d\U0001f7eb': EmojiRecord('\U0001f344\u200d\U0001f7eb', 'brown mushroom', Status.FULLY_QUALIFIED, '15.1', '\U0001f344\u200d\U0001f7eb', 'Food & Drink', 'food-vegetable'),
    '\U0001f35e': EmojiRecord('\U0001f35e', 'bread', Status.FULLY_QUALIFIED, '0.6', '\U0001f35e', 'Food & Drink', 'food-prepared'),
    '\U0001f950': EmojiRecord('\U0001f950', 'croissant', Status.FULLY_QUALIFIED, '3.0', '\U0001f950', 'Food & Drink', 'food-prepared'),
    '\U0001f956': EmojiRecord('\U0001f956', 'baguette bread', Status.FULLY_QUALIFIED, '3.0', '\U0001f956', 'Food & Drink', 'food-prepared'),
    '\U0001fad3': EmojiRecord('\U0001fad3', 'flatbread', Status.FULLY_QUALIFIED, '13.0', '\U0001fad3', 'Food & Drink', 'food-prepared'),
    '\U0001f968': EmojiRecord('\U0001f968', 'pretzel', Status.FULLY_QUALIFIED, '5.0', '\U0001f968', 'Food & Drink', 'food-prepared'),
    '\U0001f96f': EmojiRecord('\U0001f96f', 'bagel', Status.FULLY_QUALIFIED, '11.0', '\U0001f96f', 'Food & Drink', 'food-prepared'),
    '\U0001f95e': EmojiRecord('\U0001f95e', 'pancakes', Status.FULLY_QUALIFIED, '3.0', '\U0001f95e', 'Food & Drink', 'food-prepared'),
    '\U0001f9c7': EmojiRecord('\U0001f9c7', 'waffle', Status.FULLY_QUALIFIED, '12.0', '\U0001f9c7', 'Food & Drink', 'food-prepared'),
    '\U0001f9c0': EmojiRecord('\U0001f9c0', 'cheese wedge', Status.FULLY_QUALIFIED, '1.0', '\U0001f9c0', 'Food & Drink', 'food-prepared'),
    '\U0001f356': EmojiRecord('\U0001f356', 'meat on bone', Status.FULLY_QUALIFIED, '0.6', '\U0001f356', 'Food & Drink', 'food-prepared'),
    '\U0001f357': EmojiRecord('\U0001f357', 'poultry leg', Status.FULLY_QUALIFIED, '0.6', '\U0001f357', 'Food & Drink', 'food-prepared'),
    '\U0001f969': EmojiRecord('\U0001f969', 'cut of meat', Status.FULLY_QUALIFIED, '5.0', '\U0001f969', 'Food & Drink', 'food-prepared'),
    '\U0001f953': EmojiRecord('\U0001f953', 'bacon', Status.FULLY_QUALIFIED, '3.0', '\U0001f953', 'Food & Drink', 'food-prepared'),
    '\U0001f354': EmojiRecord('\U0001f354', 'hamburger', Status.FULLY_QUALIFIED, '0.6', '\U0001f354', 'Food & Drink', 'food-prepared'),
    '\U0001f35f': EmojiRecord('\U0001f35f', 'french fries', Status.FULLY_QUALIFIED, '0.6', '\U0001f35f', 'Food & Drink', 'food-prepared'),
    '\U0001f355': EmojiRecord('\U0001f355', 'pizza', Status.FULLY_QUALIFIED, '0.6', '\U0001f355', 'Food & Drink', 'food-prepared'),
    '\U0001f32d': EmojiRecord('\U0001f32d', 'hot dog', Status.FULLY_QUALIFIED, '1.0', '\U0001f32d', 'Food & Drink', 'food-prepared'),
    '\U0001f96a': EmojiRecord('\U0001f96a', 'sandwich', Status.FULLY_QUALIFIED, '5.0', '\U0001f96a', 'Food & Drink', 'food-prepared'),
    '\U0001f32e': EmojiRecord('\U0001f32e', 'taco', Status.FULLY_QUALIFIED, '1.0', '\U0001f32e', 'Food & Drink', 'food-prepared'),
    '\U0001f32f': EmojiRecord('\U0001f32f', 'burrito', Status.FULLY_QUALIFIED, '1.0', '\U0001f32f', 'Food & Drink', 'food-prepared'),
    '\U0001fad4': EmojiRecord('\U0001fad4', 'tamale', Status.FULLY_QUALIFIED, '13.0', '\U0001fad4', 'Food & Drink', 'food-prepared'),
    '\U0001f959': EmojiRecord('\U0001f959', 'stuffed flatbread', Status.FULLY_QUALIFIED, '3.0', '\U0001f959', 'Food & Drink', 'food-prepared'),
    '\U0001f9c6': EmojiRecord('\U0001f9c6', 'falafel', Status.FULLY_QUALIFIED, '12.0', '\U0001f9c6', 'Food & Drink', 'food-prepared'),
    '\U0001f95a': EmojiRecord('\U0001f95a', 'egg', Status.FULLY_QUALIFIED, '3.0', '\U0001f95a', 'Food & Drink', 'food-prepared'),
    '\U0001f373': EmojiRecord('\U0001f373', 'cooking', Status.FULLY_QUALIFIED, '0.6', '\U0001f373', 'Food & Drink', 'food-prepared'),
    '\U0001f958': EmojiRecord('\U0001f958', 'shallow pan of food', Status.FULLY_QUALIFIED, '3.0', '\U0001f958', 'Food & Drink', 'food-prepared'),
    '\U0001f372': EmojiRecord('\U0001f372', 'pot of food', Status.FULLY_QUALIFIED, '0.6', '\U0001f372', 'Food & Drink', 'food-prepared'),
    '\U0001fad5': EmojiRecord('\U0001fad5', 'fondue', Status.FULLY_QUALIFIED, '13.0', '\U0001fad5', 'Food & Drink', 'food-prepared'),
    '\U0001f963': EmojiRecord('\U0001f963', 'bowl with spoon', Status.FULLY_QUALIFIED, '5.0', '\U0001f963', 'Food & Drink', 'food-prepared'),
    '\U0001f957': EmojiRecord('\U0001f957', 'green salad', Status.FULLY_QUALIFIED, '3.0', '\U0001f957', 'Food & Drink', 'food-prepared'),
    '\U0001f37f': EmojiRecord('\U0001f37f', 'popcorn', Status.FULLY_QUALIFIED, '1.0', '\U0001f37f', 'Food & Drink', 'food-prepared'),
    '\U0001f9c8': EmojiRecord('\U0001f9c8', 'butter', Status.FULLY_QUALIFIED, '12.0', '\U0001f9c8', 'Food & Drink', 'food-prepared'),
    '\U0001f9c2': EmojiRecord('\U0001f9c2', 'salt', Status.FULLY_QUALIFIED, '11.0', '\U0001f9c2', 'Food & Drink', 'food-prepared'),
    '\U0001f96b': EmojiRecord('\U0001f96b', 'canned food', Status.FULLY_QUALIFIED, '5.0', '\U0001f96b', 'Food & Drink', 'food-prepared'),
    '\U0001f371': EmojiRecord('\U0001f371', 'bento box', Status.FULLY_QUALIFIED, '0.6', '\U0001f371', 'Food & Drink', 'food-asian'),
    '\U0001f358': EmojiRecord('\U0001f358', 'rice cracker', Status.FULLY_QUALIFIED, '0.6', '\U0001f358', 'Food & Drink', 'food-asian'),
    '\U0001f359': EmojiRecord('\U0001f359', 'rice ball', Status.FULLY_QUALIFIED, '0.6', '\U0001f359', 'Food & Drink', 'food-asian'),
    '\U0001f35a': EmojiRecord('\U0001f35a', 'cooked rice', Status.FULLY_QUALIFIED, '0.6', '\U0001f35a', 'Food & Drink', 'food-asian'),
    '\U0001f35b': EmojiRecord('\U0001f35b', 'curry rice', Status.FULLY_QUALIFIED, '0.6', '\U0001f35b', 'Food & Drink', 'food-asian'),
    '\U0001f35c': EmojiRecord('\U0001f35c', 'steaming bowl', Status.FULLY_QUALIFIED, '0.6', '\U0001f35c', 'Food & Drink', 'food-asian'),
    '\U0001f35d': EmojiRecord('\U0001f35d', 'spaghetti', Status.FULLY_QUALIFIED, '0.6', '\U0001f35d', 'Food & Drink', 'food-asian'),
    '\U0001f360': EmojiRecord('\U0001f360', 'roasted sweet potato', Status.FULLY_QUALIFIED, '0.6', '\U0001f360', 'Food & Drink', 'food-asian'),
    '\U0001f362': EmojiRecord('\U0001f362', 'oden', Status.FULLY_QUALIFIED, '0.6', '\U0001f362', 'Food & Drink', 'food-asian'),
    '\U0001f363': EmojiRecord('\U0001f363', 'sushi', Status.FULLY_QUALIFIED, '0.6', '\U0001f363', 'Food & Drink', 'food-asian'),
    '\U0001f364': EmojiRecord('\U0001f364', 'fried shrimp', Status.FULLY_QUALIFIED, '0.6', '\U0001f364', 'Food & Drink', 'food-asian'),
    '\U0001f365': EmojiRecord('\U0001f365', 'fish cake with swirl', Status.FULLY_QUALIFIED, '0.6', '\U0001f365', 'Food & Drink', 'food-asian'),
    '\U0001f96e': EmojiRecord('\U0001f96e', 'moon cake', Status.FULLY_QUALIFIED, '11.0', '\U0001f96e', 'Food & Drink', 'food-asian'),
    '\U0001f361': EmojiRecord('\U0001f361', 'dango', Status.FULLY_QUALIFIED, '0.6', '\U0001f361', 'Food & Drink', 'food-asian'),
    '\U0001f95f': EmojiRecord('\U0001f95f', 'dumpling', Status.FULLY_QUALIFIED, '5.0', '\U0001f95f', 'Food & Drink', 'food-asian'),
    '\U0001f960': EmojiRecord('\U0001f960', 'fortune cookie', Status.FULLY_QUALIFIED, '5.0', '\U0001f960', 'Food & Drink', 'food-asian'),
    '\U0001f961': EmojiRecord('\U0001f961', 'takeout box', Status.FULLY_QUALIFIED, '5.0', '\U0001f961', 'Food & Drink', 'food-asian'),
    '\U0001f980': EmojiRecord('\U0001f980', 'crab', Status.FULLY_QUALIFIED, '1.0', '\U0001f980', 'Food & Drink', 'food-marine'),
    '\U0001f99e': EmojiRecord('\U0001f99e', 'lobster', Status.FULLY_QUALIFIED, '11.0', '\U0001f99e', 'Food & Drink', 'food-marine'),
    '\U0001f990': EmojiRecord('\U0001f990', 'shrimp', Status.FULLY_QUALIFIED, '3.0', '\U0001f990', 'Food & Drink', 'food-marine'),
    '\U0001f991': EmojiRecord('\U0001f991', 'squid', Status.FULLY_QUALIFIED, '3.0', '\U0001f991', 'Food & Drink', 'food-marine'),
    '\U0001f9aa': EmojiRecord('\U0001f9aa', 'oyster', Status.FULLY_QUALIFIED, '12.0', '\U0001f9aa', 'Food & Drink', 'food-marine'),
    '\U0001f366': EmojiRecord('\U0001f366', 'soft ice cream', Status.FULLY_QUALIFIED, '0.6', '\U0001f366', 'Food & Drink', 'food-sweet'),
    '\U0001f367': EmojiRecord('\U0001f367', 'shaved ice', Status.FULLY_QUALIFIED, '0.6', '\U0001f367', 'Food & Drink', 'food-sweet'),
    '\U0001f368': EmojiRecord('\U0001f368', 'ice cream', Status.FULLY_QUALIFIED, '0.6', '\U0001f368', 'Food & Drink', 'food-sweet'),
    '\U0001f369': EmojiRecord('\U0001f369', 'doughnut', Status.FULLY_QUALIFIED, '0.6', '\U0001f369', 'Food & Drink', 'food-sweet'),
    '\U0001f36a': EmojiRecord('\U0001f36a', 'cookie', Status.FULLY_QUALIFIED, '0.6', '\U0001f36a', 'Food & Drink', 'food-sweet'),
    '\U0001f382': EmojiRecord('\U0001f382', 'birthday cake', Status.FULLY_QUALIFIED, '0.6', '\U0001f382', 'Food & Drink', 'food-sweet'),
    '\U0001f370': EmojiRecord('\U0001f370', 'shortcake', Status.FULLY_QUALIFIED, '0.6', '\U0001f370', 'Food & Drink', 'food-sweet'),
    '\U0001f9c1': EmojiRecord('\U0001f9c1', 'cupcake', Status.FULLY_QUALIFIED, '11.0', '\U0001f9c1', 'Food & Drink', 'food-sweet'),
    '\U0001f967': EmojiRecord('\U0001f967', 'pie', Status.FULLY_QUALIFIED, '5.0', '\U0001f967', 'Food & Drink', 'food-sweet'),
    '\U0001f36b': EmojiRecord('\U0001f36b', 'chocolate bar', Status.FULLY_QUALIFIED, '0.6', '\U0001f36b', 'Food & Drink', 'food-sweet'),
    '\U0001f36c': EmojiRecord('\U0001f36c', 'candy', Status.FULLY_QUALIFIED, '0.6', '\U0001f36c', 'Food & Drink', 'food-sweet'),
    '\U0001f36d': EmojiRecord('\U0001f36d', 'lollipop', Status.FULLY_QUALIFIED, '0.6', '\U0001f36d', 'Food & Drink', 'food-sweet'),
    '\U0001f36e': EmojiRecord('\U0001f36e', 'custard', Status.FULLY_QUALIFIED, '0.6', '\U0001f36e', 'Food & Drink', 'food-sweet'),
    '\U0001f36f': EmojiRecord('\U0001f36f', 'honey pot', Status.FULLY_QUALIFIED, '0.6', '\U0001f36f', 'Food & Drink', 'food-sweet'),
    '\U0001f37c': EmojiRecord('\U0001f37c', 'baby bottle', Status.FULLY_QUALIFIED, '1.0', '\U0001f37c', 'Food & Drink', 'drink'),
    '\U0001f95b': EmojiRecord('\U0001f95b', 'glass of milk', Status.FULLY_QUALIFIED, '3.0', '\U0001f95b', 'Food & Drink', 'drink'),
    '\u2615': EmojiRecord('\u2615', 'hot beverage', Status.FULLY_QUALIFIED, '0.6', '\u2615', 'Food & Drink', 'drink'),
    '\U0001fad6': EmojiRecord('\U0001fad6', 'teapot', Status.FULLY_QUALIFIED, '13.0', '\U0001fad6', 'Food & Drink', 'drink'),
    '\U0001f375': EmojiRecord('\U0001f375', 'teacup without handle', Status.FULLY_QUALIFIED, '0.6', '\U0001f375', 'Food & Drink', 'drink'),
    '\U0001f376': EmojiRecord('\U0001f376', 'sake', Status.FULLY_QUALIFIED, '0.6', '\U0001f376', 'Food & Drink', 'drink'),
    '\U0001f37e': EmojiRecord('\U0001f37e', 'bottle with popping cork', Status.FULLY_QUALIFIED, '1.0', '\U0001f37e', 'Food & Drink', 'drink'),
    '\U0001f377': EmojiRecord('\U0001f377', 'wine glass', Status.FULLY_QUALIFIED, '0.6', '\U0001f377', 'Food & Drink', 'drink'),
    '\U0001f378': EmojiRecord('\U0001f378', 'cocktail glass', Status.FULLY_QUALIFIED, '0.6', '\U0001f378', 'Food & Drink', 'drink'),
    '\U0001f379': EmojiRecord('\U0001f379', 'tropical drink', Status.FULLY_QUALIFIED, '0.6', '\U0001f379', 'Food & Drink', 'drink'),
    '\U0001f37a': EmojiRecord('\U0001f37a', 'beer mug', Status.FULLY_QUALIFIED, '0.6', '\U0001f37a', 'Food & Drink', 'drink'),
    '\U0001f37b': EmojiRecord('\U0001f37b', 'clinking beer mugs', Status.FULLY_QUALIFIED, '0.6', '\U0001f37b', 'Food & Drink', 'drink'),
    '\U0001f942': EmojiRecord('\U0001f942', 'clinking glasses', Status.FULLY_QUALIFIED, '3.0', '\U0001f942', 'Food & Drink', 'drink'),
    '\U0001f943': EmojiRecord('\U0001f943', 'tumbler glass', Status.FULLY_QUALIFIED, '3.0', '\U0001f943', 'Food & Drink', 'drink'),
    '\U0001fad7': EmojiRecord('\U0001fad7', 'pouring liquid', Status.FULLY_QUALIFIED, '14.0', '\U0001fad7', 'Food & Drink', 'drink'),
    '\U0001f964': EmojiRecord('\U0001f964', 'cup with straw', Status.FULLY_QUALIFIED, '5.0', '\U0001f964', 'Food & Drink', 'drink'),
    '\U0001f9cb': EmojiRecord('\U0001f9cb', 'bubble tea', Status.FULLY_QUALIFIED, '13.0', '\U0001f9cb', 'Food & Drink', 'drink'),
    '\U0001f9c3': EmojiRecord('\U0001f9c3', 'beverage box', Status.FULLY_QUALIFIED, '12.0', '\U0001f9c3', 'Food & Drink', 'drink'),
    '\U0001f9c9': EmojiRecord('\U0001f9c9', 'mate', Status.FULLY_QUALIFIED, '12.0', '\U0001f9c9', 'Food & Drink', 'drink'),
    '\U0001f9ca': EmojiRecord('\U0001f9ca', 'ice', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ca', 'Food & Drink', 'drink'),
    '\U0001f962': EmojiRecord('\U0001f962', 'chopsticks', Status.FULLY_QUALIFIED, '5.0', '\U0001f962', 'Food & Drink', 'dishware'),
    '\U0001f37d\ufe0f': EmojiRecord('\U0001f37d\ufe0f', 'fork and knife with plate', Status.FULLY_QUALIFIED, '0.7', '\U0001f37d\ufe0f', 'Food & Drink', 'dishware'),
    '\U0001f37d': EmojiRecord('\U0001f37d', 'fork and knife with plate', Status.UNQUALIFIED, '0.7', '\U0001f37d\ufe0f', 'Food & Drink', 'dishware'),
    '\U0001f374': EmojiRecord('\U0001f374', 'fork and knife', Status.FULLY_QUALIFIED, '0.6', '\U0001f374', 'Food & Drink', 'dishware'),
    '\U0001f944': EmojiRecord('\U0001f944', 'spoon', Status.FULLY_QUALIFIED, '3.0', '\U0001f944', 'Food & Drink', 'dishware'),
    '\U0001f52a': EmojiRecord('\U0001f52a', 'kitchen knife', Status.FULLY_QUALIFIED, '0.6', '\U0001f52a', 'Food & Drink', 'dishware'),
    '\U0001fad9': EmojiRecord('\U0001fad9', 'jar', Status.FULLY_QUALIFIED, '14.0', '\U0001fad9', 'Food & Drink', 'dishware'),
    '\U0001f3fa': EmojiRecord('\U0001f3fa', 'amphora', Status.FULLY_QUALIFIED, '1.0', '\U0001f3fa', 'Food & Drink', 'dishware'),
    '\U0001f30d': EmojiRecord('\U0001f30d', 'globe showing Europe-Africa', Status.FULLY_QUALIFIED, '0.7', '\U0001f30d', 'Travel & Places', 'place-map'),
    '\U0001f30e': EmojiRecord('\U0001f30e', 'globe showing Americas', Status.FULLY_QUALIFIED, '0.7', '\U0001f30e', 'Travel & Places', 'place-map'),
    '\U0001f30f': EmojiRecord('\U0001f30f', 'globe showing Asia-Australia', Status.FULLY_QUALIFIED, '0.6', '\U0001f30f', 'Travel & Places', 'place-map'),
    '\U0001f310': EmojiRecord('\U0001f310', 'globe with meridians', Status.FULLY_QUALIFIED, '1.0', '\U0001f310', 'Travel & Places', 'place-map'),
    '\U0001f5fa\ufe0f': EmojiRecord('\U0001f5fa\ufe0f', 'world map', Status.FULLY_QUALIFIED, '0.7', '\U0001f5fa\ufe0f', 'Travel & Places', 'place-map'),
    '\U0001f5fa': EmojiRecord('\U0001f5fa', 'world map', Status.UNQUALIFIED, '0.7', '\U0001f5fa\ufe0f', 'Travel & Places', 'place-map'),
    '\U0001f5fe': EmojiRecord('\U0001f5fe', 'map of Japan', Status.FULLY_QUALIFIED, '0.6', '\U0001f5fe', 'Travel & Places', 'place-map'),
    '\U0001f9ed': EmojiRecord('\U0001f9ed', 'compass', Status.FULLY_QUALIFIED, '11.0', '\U0001f9ed', 'Travel & Places', 'place-map'),
    '\U0001f3d4\ufe0f': EmojiRecord('\U0001f3d4\ufe0f', 'snow-capped mountain', Status.FULLY_QUALIFIED, '0.7', '\U0001f3d4\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3d4': EmojiRecord('\U0001f3d4', 'snow-capped mountain', Status.UNQUALIFIED, '0.7', '\U0001f3d4\ufe0f', 'Travel & Places', 'place-geographic'),
    '\u26f0\ufe0f': EmojiRecord('\u26f0\ufe0f', 'mountain', Status.FULLY_QUALIFIED, '0.7', '\u26f0\ufe0f', 'Travel & Places', 'place-geographic'),
    '\u26f0': EmojiRecord('\u26f0', 'mountain', Status.UNQUALIFIED, '0.7', '\u26f0\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f30b': EmojiRecord('\U0001f30b', 'volcano', Status.FULLY_QUALIFIED, '0.6', '\U0001f30b', 'Travel & Places', 'place-geographic'),
    '\U0001f5fb': EmojiRecord('\U0001f5fb', 'mount fuji', Status.FULLY_QUALIFIED, '0.6', '\U0001f5fb', 'Travel & Places', 'place-geographic'),
    '\U0001f3d5\ufe0f': EmojiRecord('\U0001f3d5\ufe0f', 'camping', Status.FULLY_QUALIFIED, '0.7', '\U0001f3d5\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3d5': EmojiRecord('\U0001f3d5', 'camping', Status.UNQUALIFIED, '0.7', '\U0001f3d5\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3d6\ufe0f': EmojiRecord('\U0001f3d6\ufe0f', 'beach with umbrella', Status.FULLY_QUALIFIED, '0.7', '\U0001f3d6\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3d6': EmojiRecord('\U0001f3d6', 'beach with umbrella', Status.UNQUALIFIED, '0.7', '\U0001f3d6\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3dc\ufe0f': EmojiRecord('\U0001f3dc\ufe0f', 'desert', Status.FULLY_QUALIFIED, '0.7', '\U0001f3dc\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3dc': EmojiRecord('\U0001f3dc', 'desert', Status.UNQUALIFIED, '0.7', '\U0001f3dc\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3dd\ufe0f': EmojiRecord('\U0001f3dd\ufe0f', 'desert island', Status.FULLY_QUALIFIED, '0.7', '\U0001f3dd\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3dd': EmojiRecord('\U0001f3dd', 'desert island', Status.UNQUALIFIED, '0.7', '\U0001f3dd\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3de\ufe0f': EmojiRecord('\U0001f3de\ufe0f', 'national park', Status.FULLY_QUALIFIED, '0.7', '\U0001f3de\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3de': EmojiRecord('\U0001f3de', 'national park', Status.UNQUALIFIED, '0.7', '\U0001f3de\ufe0f', 'Travel & Places', 'place-geographic'),
    '\U0001f3df\ufe0f': EmojiRecord('\U0001f3df\ufe0f', 'stadium', Status.FULLY_QUALIFIED, '0.7', '\U0001f3df\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3df': EmojiRecord('\U0001f3df', 'stadium', Status.UNQUALIFIED, '0.7', '\U0001f3df\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3db\ufe0f': EmojiRecord('\U0001f3db\ufe0f', 'classical building', Status.FULLY_QUALIFIED, '0.7', '\U0001f3db\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3db': EmojiRecord('\U0001f3db', 'classical building', Status.UNQUALIFIED, '0.7', '\U0001f3db\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3d7\ufe0f': EmojiRecord('\U0001f3d7\ufe0f', 'building construction', Status.FULLY_QUALIFIED, '0.7', '\U0001f3d7\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3d7': EmojiRecord('\U0001f3d7', 'building construction', Status.UNQUALIFIED, '0.7', '\U0001f3d7\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f9f1': EmojiRecord('\U0001f9f1', 'brick', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f1', 'Travel & Places', 'place-building'),
    '\U0001faa8': EmojiRecord('\U0001faa8', 'rock', Status.FULLY_QUALIFIED, '13.0', '\U0001faa8', 'Travel & Places', 'place-building'),
    '\U0001fab5': EmojiRecord('\U0001fab5', 'wood', Status.FULLY_QUALIFIED, '13.0', '\U0001fab5', 'Travel & Places', 'place-building'),
    '\U0001f6d6': EmojiRecord('\U0001f6d6', 'hut', Status.FULLY_QUALIFIED, '13.0', '\U0001f6d6', 'Travel & Places', 'place-building'),
    '\U0001f3d8\ufe0f': EmojiRecord('\U0001f3d8\ufe0f', 'houses', Status.FULLY_QUALIFIED, '0.7', '\U0001f3d8\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3d8': EmojiRecord('\U0001f3d8', 'houses', Status.UNQUALIFIED, '0.7', '\U0001f3d8\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3da\ufe0f': EmojiRecord('\U0001f3da\ufe0f', 'derelict house', Status.FULLY_QUALIFIED, '0.7', '\U0001f3da\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3da': EmojiRecord('\U0001f3da', 'derelict house', Status.UNQUALIFIED, '0.7', '\U0001f3da\ufe0f', 'Travel & Places', 'place-building'),
    '\U0001f3e0': EmojiRecord('\U0001f3e0', 'house', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e0', 'Travel & Places', 'place-building'),
    '\U0001f3e1': EmojiRecord('\U0001f3e1', 'house with garden', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e1', 'Travel & Places', 'place-building'),
    '\U0001f3e2': EmojiRecord('\U0001f3e2', 'office building', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e2', 'Travel & Places', 'place-building'),
    '\U0001f3e3': EmojiRecord('\U0001f3e3', 'Japanese post office', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e3', 'Travel & Places', 'place-building'),
    '\U0001f3e4': EmojiRecord('\U0001f3e4', 'post office', Status.FULLY_QUALIFIED, '1.0', '\U0001f3e4', 'Travel & Places', 'place-building'),
    '\U0001f3e5': EmojiRecord('\U0001f3e5', 'hospital', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e5', 'Travel & Places', 'place-building'),
    '\U0001f3e6': EmojiRecord('\U0001f3e6', 'bank', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e6', 'Travel & Places', 'place-building'),
    '\U0001f3e8': EmojiRecord('\U0001f3e8', 'hotel', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e8', 'Travel & Places', 'place-building'),
    '\U0001f3e9': EmojiRecord('\U0001f3e9', 'love hotel', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e9', 'Travel & Places', 'place-building'),
    '\U0001f3ea': EmojiRecord('\U0001f3ea', 'convenience store', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ea', 'Travel & Places', 'place-building'),
    '\U0001f3eb': EmojiRecord('\U0001f3eb', 'school', Status.FULLY_QUALIFIED, '0.6', '\U0001f3eb', 'Travel & Places', 'place-building'),
    '\U0001f3ec': EmojiRecord('\U0001f3ec', 'department store', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ec', 'Travel & Places', 'place-building'),
    '\U0001f3ed': EmojiRecord('\U0001f3ed', 'factory', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ed', 'Travel & Places', 'place-building'),
    '\U0001f3ef': EmojiRecord('\U0001f3ef', 'Japanese castle', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ef', 'Travel & Places', 'place-building'),
    '\U0001f3f0': EmojiRecord('\U0001f3f0', 'castle', Status.FULLY_QUALIFIED, '0.6', '\U0001f3f0', 'Travel & Places', 'place-building'),
    '\U0001f492': EmojiRecord('\U0001f492', 'wedding', Status.FULLY_QUALIFIED, '0.6', '\U0001f492', 'Travel & Places', 'place-building'),
    '\U0001f5fc': EmojiRecord('\U0001f5fc', 'Tokyo tower', Status.FULLY_QUALIFIED, '0.6', '\U0001f5fc', 'Travel & Places', 'place-building'),
    '\U0001f5fd': EmojiRecord('\U0001f5fd', 'Statue of Liberty', Status.FULLY_QUALIFIED, '0.6', '\U0001f5fd', 'Travel & Places', 'place-building'),
    '\u26ea': EmojiRecord('\u26ea', 'church', Status.FULLY_QUALIFIED, '0.6', '\u26ea', 'Travel & Places', 'place-religious'),
    '\U0001f54c': EmojiRecord('\U0001f54c', 'mosque', Status.FULLY_QUALIFIED, '1.0', '\U0001f54c', 'Travel & Places', 'place-religious'),
    '\U0001f6d5': EmojiRecord('\U0001f6d5', 'hindu temple', Status.FULLY_QUALIFIED, '12.0', '\U0001f6d5', 'Travel & Places', 'place-religious'),
    '\U0001f54d': EmojiRecord('\U0001f54d', 'synagogue', Status.FULLY_QUALIFIED, '1.0', '\U0001f54d', 'Travel & Places', 'place-religious'),
    '\u26e9\ufe0f': EmojiRecord('\u26e9\ufe0f', 'shinto shrine', Status.FULLY_QUALIFIED, '0.7', '\u26e9\ufe0f', 'Travel & Places', 'place-religious'),
    '\u26e9': EmojiRecord('\u26e9', 'shinto shrine', Status.UNQUALIFIED, '0.7', '\u26e9\ufe0f', 'Travel & Places', 'place-religious'),
    '\U0001f54b': EmojiRecord('\U0001f54b', 'kaaba', Status.FULLY_QUALIFIED, '1.0', '\U0001f54b', 'Travel & Places', 'place-religious'),
    '\u26f2': EmojiRecord('\u26f2', 'fountain', Status.FULLY_QUALIFIED, '0.6', '\u26f2', 'Travel & Places', 'place-other'),
    '\u26fa': EmojiRecord('\u26fa', 'tent', Status.FULLY_QUALIFIED, '0.6', '\u26fa', 'Travel & Places', 'place-other'),
    '\U0001f301': EmojiRecord('\U0001f301', 'foggy', Status.FULLY_QUALIFIED, '0.6', '\U0001f301', 'Travel & Places', 'place-other'),
    '\U0001f303': EmojiRecord('\U0001f303', 'night with stars', Status.FULLY_QUALIFIED, '0.6', '\U0001f303', 'Travel & Places', 'place-other'),
    '\U0001f3d9\ufe0f': EmojiRecord('\U0001f3d9\ufe0f', 'cityscape', Status.FULLY_QUALIFIED, '0.7', '\U0001f3d9\ufe0f', 'Travel & Places', 'place-other'),
    '\U0001f3d9': EmojiRecord('\U0001f3d9', 'cityscape', Status.UNQUALIFIED, '0.7', '\U0001f3d9\ufe0f', 'Travel & Places', 'place-other'),
    '\U0001f304': EmojiRecord('\U0001f304', 'sunrise over mountains', Status.FULLY_QUALIFIED, '0.6', '\U0001f304', 'Travel & Places', 'place-other'),
    '\U0001f305': EmojiRecord('\U0001f305', 'sunrise', Status.FULLY_QUALIFIED, '0.6', '\U0001f305', 'Travel & Places', 'place-other'),
    '\U0001f306': EmojiRecord('\U0001f306', 'cityscape at dusk', Status.FULLY_QUALIFIED, '0.6', '\U0001f306', 'Travel & Places', 'place-other'),
    '\U0001f307': EmojiRecord('\U0001f307', 'sunset', Status.FULLY_QUALIFIED, '0.6', '\U0001f307', 'Travel & Places', 'place-other'),
    '\U0001f309': EmojiRecord('\U0001f309', 'bridge at night', Status.FULLY_QUALIFIED, '0.6', '\U0001f309', 'Travel & Places', 'place-other'),
    '\u2668\ufe0f': EmojiRecord('\u2668\ufe0f', 'hot springs', Status.FULLY_QUALIFIED, '0.6', '\u2668\ufe0f', 'Travel & Places', 'place-other'),
    '\u2668': EmojiRecord('\u2668', 'hot springs', Status.UNQUALIFIED, '0.6', '\u2668\ufe0f', 'Travel & Places', 'place-other'),
    '\U0001f3a0': EmojiRecord('\U0001f3a0', 'carousel horse', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a0', 'Travel & Places', 'place-other'),
    '\U0001f6dd': EmojiRecord('\U0001f6dd', 'playground slide', Status.FULLY_QUALIFIED, '14.0', '\U0001f6dd', 'Travel & Places', 'place-other'),
    '\U0001f3a1': EmojiRecord('\U0001f3a1', 'ferris wheel', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a1', 'Travel & Places', 'place-other'),
    '\U0001f3a2': EmojiRecord('\U0001f3a2', 'roller coaster', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a2', 'Travel & Places', 'place-other'),
    '\U0001f488': EmojiRecord('\U0001f488', 'barber pole', Status.FULLY_QUALIFIED, '0.6', '\U0001f488', 'Travel & Places', 'place-other'),
    '\U0001f3aa': EmojiRecord('\U0001f3aa', 'circus tent', Status.FULLY_QUALIFIED, '0.6', '\U0001f3aa', 'Travel & Places', 'place-other'),
    '\U0001f682': EmojiRecord('\U0001f682', 'locomotive', Status.FULLY_QUALIFIED, '1.0', '\U0001f682', 'Travel & Places', 'transport-ground'),
    '\U0001f683': EmojiRecord('\U0001f683', 'railway car', Status.FULLY_QUALIFIED, '0.6', '\U0001f683', 'Travel & Places', 'transport-ground'),
    '\U0001f684': EmojiRecord('\U0001f684', 'high-speed train', Status.FULLY_QUALIFIED, '0.6', '\U0001f684', 'Travel & Places', 'transport-ground'),
    '\U0001f685': EmojiRecord('\U0001f685', 'bullet train', Status.FULLY_QUALIFIED, '0.6', '\U0001f685', 'Travel & Places', 'transport-ground'),
    '\U0001f686': EmojiRecord('\U0001f686', 'train', Status.FULLY_QUALIFIED, '1.0', '\U0001f686', 'Travel & Places', 'transport-ground'),
    '\U0001f687': EmojiRecord('\U0001f687', 'metro', Status.FULLY_QUALIFIED, '0.6', '\U0001f687', 'Travel & Places', 'transport-ground'),
    '\U0001f688': EmojiRecord('\U0001f688', 'light rail', Status.FULLY_QUALIFIED, '1.0', '\U0001f688', 'Travel & Places', 'transport-ground'),
    '\U0001f689': EmojiRecord('\U0001f689', 'station', Status.FULLY_QUALIFIED, '0.6', '\U0001f689', 'Travel & Places', 'transport-ground'),
    '\U0001f68a': EmojiRecord('\U0001f68a', 'tram', Status.FULLY_QUALIFIED, '1.0', '\U0001f68a', 'Travel & Places', 'transport-ground'),
    '\U0001f69d': EmojiRecord('\U0001f69d', 'monorail', Status.FULLY_QUALIFIED, '1.0', '\U0001f69d', 'Travel & Places', 'transport-ground'),
    '\U0001f69e': EmojiRecord('\U0001f69e', 'mountain railway', Status.FULLY_QUALIFIED, '1.0', '\U0001f69e', 'Travel & Places', 'transport-ground'),
    '\U0001f68b': EmojiRecord('\U0001f68b', 'tram car', Status.FULLY_QUALIFIED, '1.0', '\U0001f68b', 'Travel & Places', 'transport-ground'),
    '\U0001f68c': EmojiRecord('\U0001f68c', 'bus', Status.FULLY_QUALIFIED, '0.6', '\U0001f68c', 'Travel & Places', 'transport-ground'),
    '\U0001f68d': EmojiRecord('\U0001f68d', 'oncoming bus', Status.FULLY_QUALIFIED, '0.7', '\U0001f68d', 'Travel & Places', 'transport-ground'),
    '\U0001f68e': EmojiRecord('\U0001f68e', 'trolleybus', Status.FULLY_QUALIFIED, '1.0', '\U0001f68e', 'Travel & Places', 'transport-ground'),
    '\U0001f690': EmojiRecord('\U0001f690', 'minibus', Status.FULLY_QUALIFIED, '1.0', '\U0001f690', 'Travel & Places', 'transport-ground'),
    '\U0001f691': EmojiRecord('\U0001f691', 'ambulance', Status.FULLY_QUALIFIED, '0.6', '\U0001f691', 'Travel & Places', 'transport-ground'),
    '\U0001f692': EmojiRecord('\U0001f692', 'fire engine', Status.FULLY_QUALIFIED, '0.6', '\U0001f692', 'Travel & Places', 'transport-ground'),
    '\U0001f693': EmojiRecord('\U0001f693', 'police car', Status.FULLY_QUALIFIED, '0.6', '\U0001f693', 'Travel & Places', 'transport-ground'),
    '\U0001f694': EmojiRecord('\U0001f694', 'oncoming police car', Status.FULLY_QUALIFIED, '0.7', '\U0001f694', 'Travel & Places', 'transport-ground'),
    '\U0001f695': EmojiRecord('\U0001f695', 'taxi', Status.FULLY_QUALIFIED, '0.6', '\U0001f695', 'Travel & Places', 'transport-ground'),
    '\U0001f696': EmojiRecord('\U0001f696', 'oncoming taxi', Status.FULLY_QUALIFIED, '1.0', '\U0001f696', 'Travel & Places', 'transport-ground'),
    '\U0001f697': EmojiRecord('\U0001f697', 'automobile', Status.FULLY_QUALIFIED, '0.6', '\U0001f697', 'Travel & Places', 'transport-ground'),
    '\U0001f698': EmojiRecord('\U0001f698', 'oncoming automobile', Status.FULLY_QUALIFIED, '0.7', '\U0001f698', 'Travel & Places', 'transport-ground'),
    '\U0001f699': EmojiRecord('\U0001f699', 'sport utility vehicle', Status.FULLY_QUALIFIED, '0.6', '\U0001f699', 'Travel & Places', 'transport-ground'),
    '\U0001f6fb': EmojiRecord('\U0001f6fb', 'pickup truck', Status.FULLY_QUALIFIED, '13.0', '\U0001f6fb', 'Travel & Places', 'transport-ground'),
    '\U0001f69a': EmojiRecord('\U0001f69a', 'delivery truck', Status.FULLY_QUALIFIED, '0.6', '\U0001f69a', 'Travel & Places', 'transport-ground'),
    '\U0001f69b': EmojiRecord('\U0001f69b', 'articulated lorry', Status.FULLY_QUALIFIED, '1.0', '\U0001f69b', 'Travel & Places', 'transport-ground'),
    '\U0001f69c': EmojiRecord('\U0001f69c', 'tractor', Status.FULLY_QUALIFIED, '1.0', '\U0001f69c', 'Travel & Places', 'transport-ground'),
    '\U0001f3ce\ufe0f': EmojiRecord('\U0001f3ce\ufe0f', 'racing car', Status.FULLY_QUALIFIED, '0.7', '\U0001f3ce\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f3ce': EmojiRecord('\U0001f3ce', 'racing car', Status.UNQUALIFIED, '0.7', '\U0001f3ce\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f3cd\ufe0f': EmojiRecord('\U0001f3cd\ufe0f', 'motorcycle', Status.FULLY_QUALIFIED, '0.7', '\U0001f3cd\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f3cd': EmojiRecord('\U0001f3cd', 'motorcycle', Status.UNQUALIFIED, '0.7', '\U0001f3cd\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f6f5': EmojiRecord('\U0001f6f5', 'motor scooter', Status.FULLY_QUALIFIED, '3.0', '\U0001f6f5', 'Travel & Places', 'transport-ground'),
    '\U0001f9bd': EmojiRecord('\U0001f9bd', 'manual wheelchair', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bd', 'Travel & Places', 'transport-ground'),
    '\U0001f9bc': EmojiRecord('\U0001f9bc', 'motorized wheelchair', Status.FULLY_QUALIFIED, '12.0', '\U0001f9bc', 'Travel & Places', 'transport-ground'),
    '\U0001f6fa': EmojiRecord('\U0001f6fa', 'auto rickshaw', Status.FULLY_QUALIFIED, '12.0', '\U0001f6fa', 'Travel & Places', 'transport-ground'),
    '\U0001f6b2': EmojiRecord('\U0001f6b2', 'bicycle', Status.FULLY_QUALIFIED, '0.6', '\U0001f6b2', 'Travel & Places', 'transport-ground'),
    '\U0001f6f4': EmojiRecord('\U0001f6f4', 'kick scooter', Status.FULLY_QUALIFIED, '3.0', '\U0001f6f4', 'Travel & Places', 'transport-ground'),
    '\U0001f6f9': EmojiRecord('\U0001f6f9', 'skateboard', Status.FULLY_QUALIFIED, '11.0', '\U0001f6f9', 'Travel & Places', 'transport-ground'),
    '\U0001f6fc': EmojiRecord('\U0001f6fc', 'roller skate', Status.FULLY_QUALIFIED, '13.0', '\U0001f6fc', 'Travel & Places', 'transport-ground'),
    '\U0001f68f': EmojiRecord('\U0001f68f', 'bus stop', Status.FULLY_QUALIFIED, '0.6', '\U0001f68f', 'Travel & Places', 'transport-ground'),
    '\U0001f6e3\ufe0f': EmojiRecord('\U0001f6e3\ufe0f', 'motorway', Status.FULLY_QUALIFIED, '0.7', '\U0001f6e3\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f6e3': EmojiRecord('\U0001f6e3', 'motorway', Status.UNQUALIFIED, '0.7', '\U0001f6e3\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f6e4\ufe0f': EmojiRecord('\U0001f6e4\ufe0f', 'railway track', Status.FULLY_QUALIFIED, '0.7', '\U0001f6e4\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f6e4': EmojiRecord('\U0001f6e4', 'railway track', Status.UNQUALIFIED, '0.7', '\U0001f6e4\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f6e2\ufe0f': EmojiRecord('\U0001f6e2\ufe0f', 'oil drum', Status.FULLY_QUALIFIED, '0.7', '\U0001f6e2\ufe0f', 'Travel & Places', 'transport-ground'),
    '\U0001f6e2': EmojiRecord('\U0001f6e2', 'oil drum', Status.UNQUALIFIED, '0.7', '\U0001f6e2\ufe0f', 'Travel & Places', 'transport-ground'),
    '\u26fd': EmojiRecord('\u26fd', 'fuel pump', Status.FULLY_QUALIFIED, '0.6', '\u26fd', 'Travel & Places', 'transport-ground'),
    '\U0001f6de': EmojiRecord('\U0001f6de', 'wheel', Status.FULLY_QUALIFIED, '14.0', '\U0001f6de', 'Travel & Places', 'transport-ground'),
    '\U0001f6a8': EmojiRecord('\U0001f6a8', 'police car light', Status.FULLY_QUALIFIED, '0.6', '\U0001f6a8', 'Travel & Places', 'transport-ground'),
    '\U0001f6a5': EmojiRecord('\U0001f6a5', 'horizontal traffic light', Status.FULLY_QUALIFIED, '0.6', '\U0001f6a5', 'Travel & Places', 'transport-ground'),
    '\U0001f6a6': EmojiRecord('\U0001f6a6', 'vertical traffic light', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a6', 'Travel & Places', 'transport-ground'),
    '\U0001f6d1': EmojiRecord('\U0001f6d1', 'stop sign', Status.FULLY_QUALIFIED, '3.0', '\U0001f6d1', 'Travel & Places', 'transport-ground'),
    '\U0001f6a7': EmojiRecord('\U0001f6a7', 'construction', Status.FULLY_QUALIFIED, '0.6', '\U0001f6a7', 'Travel & Places', 'transport-ground'),
    '\u2693': EmojiRecord('\u2693', 'anchor', Status.FULLY_QUALIFIED, '0.6', '\u2693', 'Travel & Places', 'transport-water'),
    '\U0001f6df': EmojiRecord('\U0001f6df', 'ring buoy', Status.FULLY_QUALIFIED, '14.0', '\U0001f6df', 'Travel & Places', 'transport-water'),
    '\u26f5': EmojiRecord('\u26f5', 'sailboat', Status.FULLY_QUALIFIED, '0.6', '\u26f5', 'Travel & Places', 'transport-water'),
    '\U0001f6f6': EmojiRecord('\U0001f6f6', 'canoe', Status.FULLY_QUALIFIED, '3.0', '\U0001f6f6', 'Travel & Places', 'transport-water'),
    '\U0001f6a4': EmojiRecord('\U0001f6a4', 'speedboat', Status.FULLY_QUALIFIED, '0.6', '\U0001f6a4', 'Travel & Places', 'transport-water'),
    '\U0001f6f3\ufe0f': EmojiRecord('\U0001f6f3\ufe0f', 'passenger ship', Status.FULLY_QUALIFIED, '0.7', '\U0001f6f3\ufe0f', 'Travel & Places', 'transport-water'),
    '\U0001f6f3': EmojiRecord('\U0001f6f3', 'passenger ship', Status.UNQUALIFIED, '0.7', '\U0001f6f3\ufe0f', 'Travel & Places', 'transport-water'),
    '\u26f4\ufe0f': EmojiRecord('\u26f4\ufe0f', 'ferry', Status.FULLY_QUALIFIED, '0.7', '\u26f4\ufe0f', 'Travel & Places', 'transport-water'),
    '\u26f4': EmojiRecord('\u26f4', 'ferry', Status.UNQUALIFIED, '0.7', '\u26f4\ufe0f', 'Travel & Places', 'transport-water'),
    '\U0001f6e5\ufe0f': EmojiRecord('\U0001f6e5\ufe0f', 'motor boat', Status.FULLY_QUALIFIED, '0.7', '\U0001f6e5\ufe0f', 'Travel & Places', 'transport-water'),
    '\U0001f6e5': EmojiRecord('\U0001f6e5', 'motor boat', Status.UNQUALIFIED, '0.7', '\U0001f6e5\ufe0f', 'Travel & Places', 'transport-water'),
    '\U0001f6a2': EmojiRecord('\U0001f6a2', 'ship', Status.FULLY_QUALIFIED, '0.6', '\U0001f6a2', 'Travel & Places', 'transport-water'),
    '\u2708\ufe0f': EmojiRecord('\u2708\ufe0f', 'airplane', Status.FULLY_QUALIFIED, '0.6', '\u2708\ufe0f', 'Travel & Places', 'transport-air'),
    '\u2708': EmojiRecord('\u2708', 'airplane', Status.UNQUALIFIED, '0.6', '\u2708\ufe0f', 'Travel & Places', 'transport-air'),
    '\U0001f6e9\ufe0f': EmojiRecord('\U0001f6e9\ufe0f', 'small airplane', Status.FULLY_QUALIFIED, '0.7', '\U0001f6e9\ufe0f', 'Travel & Places', 'transport-air'),
    '\U0001f6e9': EmojiRecord('\U0001f6e9', 'small airplane', Status.UNQUALIFIED, '0.7', '\U0001f6e9\ufe0f', 'Travel & Places', 'transport-air'),
    '\U0001f6eb': EmojiRecord('\U0001f6eb', 'airplane departure', Status.FULLY_QUALIFIED, '1.0', '\U0001f6eb', 'Travel & Places', 'transport-air'),
    '\U0001f6ec': EmojiRecord('\U0001f6ec', 'airplane arrival', Status.FULLY_QUALIFIED, '1.0', '\U0001f6ec', 'Travel & Places', 'transport-air'),
    '\U0001fa82': EmojiRecord('\U0001fa82', 'parachute', Status.FULLY_QUALIFIED, '12.0', '\U0001fa82', 'Travel & Places', 'transport-air'),
    '\U0001f4ba': EmojiRecord('\U0001f4ba', 'seat', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ba', 'Travel & Places', 'transport-air'),
    '\U0001f681': EmojiRecord('\U0001f681', 'helicopter', Status.FULLY_QUALIFIED, '1.0', '\U0001f681', 'Travel & Places', 'transport-air'),
    '\U0001f69f': EmojiRecord('\U0001f69f', 'suspension railway', Status.FULLY_QUALIFIED, '1.0', '\U0001f69f', 'Travel & Places', 'transport-air'),
    '\U0001f6a0': EmojiRecord('\U0001f6a0', 'mountain cableway', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a0', 'Travel & Places', 'transport-air'),
    '\U0001f6a1': EmojiRecord('\U0001f6a1', 'aerial tramway', Status.FULLY_QUALIFIED, '1.0', '\U0001f6a1', 'Travel & Places', 'transport-air'),
    '\U0001f6f0\ufe0f': EmojiRecord('\U0001f6f0\ufe0f', 'satellite', Status.FULLY_QUALIFIED, '0.7', '\U0001f6f0\ufe0f', 'Travel & Places', 'transport-air'),
    '\U0001f6f0': EmojiRecord('\U0001f6f0', 'satellite', Status.UNQUALIFIED, '0.7', '\U0001f6f0\ufe0f', 'Travel & Places', 'transport-air'),
    '\U0001f680': EmojiRecord('\U0001f680', 'rocket', Status.FULLY_QUALIFIED, '0.6', '\U0001f680', 'Travel & Places', 'transport-air'),
    '\U0001f6f8': EmojiRecord('\U0001f6f8', 'flying saucer', Status.FULLY_QUALIFIED, '5.0', '\U0001f6f8', 'Travel & Places', 'transport-air'),
    '\U0001f6ce\ufe0f': EmojiRecord('\U0001f6ce\ufe0f', 'bellhop bell', Status.FULLY_QUALIFIED, '0.7', '\U0001f6ce\ufe0f', 'Travel & Places', 'hotel'),
    '\U0001f6ce': EmojiRecord('\U0001f6ce', 'bellhop bell', Status.UNQUALIFIED, '0.7', '\U0001f6ce\ufe0f', 'Travel & Places', 'hotel'),
    '\U0001f9f3': EmojiRecord('\U0001f9f3', 'luggage', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f3', 'Travel & Places', 'hotel'),
    '\u231b': EmojiRecord('\u231b', 'hourglass done', Status.FULLY_QUALIFIED, '0.6', '\u231b', 'Travel & Places', 'time'),
    '\u23f3': EmojiRecord('\u23f3', 'hourglass not done', Status.FULLY_QUALIFIED, '0.6', '\u23f3', 'Travel & Places', 'time'),
    '\u231a': EmojiRecord('\u231a', 'watch', Status.FULLY_QUALIFIED, '0.6', '\u231a', 'Travel & Places', 'time'),
    '\u23f0': EmojiRecord('\u23f0', 'alarm clock', Status.FULLY_QUALIFIED, '0.6', '\u23f0', 'Travel & Places', 'time'),
    '\u23f1\ufe0f': EmojiRecord('\u23f1\ufe0f', 'stopwatch', Status.FULLY_QUALIFIED, '1.0', '\u23f1\ufe0f', 'Travel & Places', 'time'),
    '\u23f1': EmojiRecord('\u23f1', 'stopwatch', Status.UNQUALIFIED, '1.0', '\u23f1\ufe0f', 'Travel & Places', 'time'),
    '\u23f2\ufe0f': EmojiRecord('\u23f2\ufe0f', 'timer clock', Status.FULLY_QUALIFIED, '1.0', '\u23f2\ufe0f', 'Travel & Places', 'time'),
    '\u23f2': EmojiRecord('\u23f2', 'timer clock', Status.UNQUALIFIED, '1.0', '\u23f2\ufe0f', 'Travel & Places', 'time'),
    '\U0001f570\ufe0f': EmojiRecord('\U0001f570\ufe0f', 'mantelpiece clock', Status.FULLY_QUALIFIED, '0.7', '\U0001f570\ufe0f', 'Travel & Places', 'time'),
    '\U0001f570': EmojiRecord('\U0001f570', 'mantelpiece clock', Status.UNQUALIFIED, '0.7', '\U0001f570\ufe0f', 'Travel & Places', 'time'),
    '\U0001f55b': EmojiRecord('\U0001f55b', 'twelve o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f55b', 'Travel & Places', 'time'),
    '\U0001f567': EmojiRecord('\U0001f567', 'twelve-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f567', 'Travel & Places', 'time'),
    '\U0001f550': EmojiRecord('\U0001f550', 'one o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f550', 'Travel & Places', 'time'),
    '\U0001f55c': EmojiRecord('\U0001f55c', 'one-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f55c', 'Travel & Places', 'time'),
    '\U0001f551': EmojiRecord('\U0001f551', 'two o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f551', 'Travel & Places', 'time'),
    '\U0001f55d': EmojiRecord('\U0001f55d', 'two-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f55d', 'Travel & Places', 'time'),
    '\U0001f552': EmojiRecord('\U0001f552', 'three o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f552', 'Travel & Places', 'time'),
    '\U0001f55e': EmojiRecord('\U0001f55e', 'three-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f55e', 'Travel & Places', 'time'),
    '\U0001f553': EmojiRecord('\U0001f553', 'four o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f553', 'Travel & Places', 'time'),
    '\U0001f55f': EmojiRecord('\U0001f55f', 'four-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f55f', 'Travel & Places', 'time'),
    '\U0001f554': EmojiRecord('\U0001f554', 'five o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f554', 'Travel & Places', 'time'),
    '\U0001f560': EmojiRecord('\U0001f560', 'five-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f560', 'Travel & Places', 'time'),
    '\U0001f555': EmojiRecord('\U0001f555', 'six o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f555', 'Travel & Places', 'time'),
    '\U0001f561': EmojiRecord('\U0001f561', 'six-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f561', 'Travel & Places', 'time'),
    '\U0001f556': EmojiRecord('\U0001f556', 'seven o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f556', 'Travel & Places', 'time'),
    '\U0001f562': EmojiRecord('\U0001f562', 'seven-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f562', 'Travel & Places', 'time'),
    '\U0001f557': EmojiRecord('\U0001f557', 'eight o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f557', 'Travel & Places', 'time'),
    '\U0001f563': EmojiRecord('\U0001f563', 'eight-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f563', 'Travel & Places', 'time'),
    '\U0001f558': EmojiRecord('\U0001f558', 'nine o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f558', 'Travel & Places', 'time'),
    '\U0001f564': EmojiRecord('\U0001f564', 'nine-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f564', 'Travel & Places', 'time'),
    '\U0001f559': EmojiRecord('\U0001f559', 'ten o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f559', 'Travel & Places', 'time'),
    '\U0001f565': EmojiRecord('\U0001f565', 'ten-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f565', 'Travel & Places', 'time'),
    '\U0001f55a': EmojiRecord('\U0001f55a', 'eleven o\u2019clock', Status.FULLY_QUALIFIED, '0.6', '\U0001f55a', 'Travel & Places', 'time'),
    '\U0001f566': EmojiRecord('\U0001f566', 'eleven-thirty', Status.FULLY_QUALIFIED, '0.7', '\U0001f566', 'Travel & Places', 'time'),
    '\U0001f311': EmojiRecord('\U0001f311', 'new moon', Status.FULLY_QUALIFIED, '0.6', '\U0001f311', 'Travel & Places', 'sky & weather'),
    '\U0001f312': EmojiRecord('\U0001f312', 'waxing crescent moon', Status.FULLY_QUALIFIED, '1.0', '\U0001f312', 'Travel & Places', 'sky & weather'),
    '\U0001f313': EmojiRecord('\U0001f313', 'first quarter moon', Status.FULLY_QUALIFIED, '0.6', '\U0001f313', 'Travel & Places', 'sky & weather'),
    '\U0001f314': EmojiRecord('\U0001f314', 'waxing gibbous moon', Status.FULLY_QUALIFIED, '0.6', '\U0001f314', 'Travel & Places', 'sky & weather'),
    '\U0001f315': EmojiRecord('\U0001f315', 'full moon', Status.FULLY_QUALIFIED, '0.6', '\U0001f315', 'Travel & Places', 'sky & weather'),
    '\U0001f316': EmojiRecord('\U0001f316', 'waning gibbous moon', Status.FULLY_QUALIFIED, '1.0', '\U0001f316', 'Travel & Places', 'sky & weather'),
    '\U0001f317': EmojiRecord('\U0001f317', 'last quarter moon', Status.FULLY_QUALIFIED, '1.0', '\U0001f317', 'Travel & Places', 'sky & weather'),
    '\U0001f318': EmojiRecord('\U0001f318', 'waning crescent moon', Status.FULLY_QUALIFIED, '1.0', '\U0001f318', 'Travel & Places', 'sky & weather'),
    '\U0001f319': EmojiRecord('\U0001f319', 'crescent moon', Status.FULLY_QUALIFIED, '0.6', '\U0001f319', 'Travel & Places', 'sky & weather'),
    '\U0001f31a': EmojiRecord('\U0001f31a', 'new moon face', Status.FULLY_QUALIFIED, '1.0', '\U0001f31a', 'Travel & Places', 'sky & weather'),
    '\U0001f31b': EmojiRecord('\U0001f31b', 'first quarter moon face', Status.FULLY_QUALIFIED, '0.6', '\U0001f31b', 'Travel & Places', 'sky & weather'),
    '\U0001f31c': EmojiRecord('\U0001f31c', 'last quarter moon face', Status.FULLY_QUALIFIED, '0.7', '\U0001f31c', 'Travel & Places', 'sky & weather'),
    '\U0001f321\ufe0f': EmojiRecord('\U0001f321\ufe0f', 'thermometer', Status.FULLY_QUALIFIED, '0.7', '\U0001f321\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f321': EmojiRecord('\U0001f321', 'thermometer', Status.UNQUALIFIED, '0.7', '\U0001f321\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2600\ufe0f': EmojiRecord('\u2600\ufe0f', 'sun', Status.FULLY_QUALIFIED, '0.6', '\u2600\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2600': EmojiRecord('\u2600', 'sun', Status.UNQUALIFIED, '0.6', '\u2600\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f31d': EmojiRecord('\U0001f31d', 'full moon face', Status.FULLY_QUALIFIED, '1.0', '\U0001f31d', 'Travel & Places', 'sky & weather'),
    '\U0001f31e': EmojiRecord('\U0001f31e', 'sun with face', Status.FULLY_QUALIFIED, '1.0', '\U0001f31e', 'Travel & Places', 'sky & weather'),
    '\U0001fa90': EmojiRecord('\U0001fa90', 'ringed planet', Status.FULLY_QUALIFIED, '12.0', '\U0001fa90', 'Travel & Places', 'sky & weather'),
    '\u2b50': EmojiRecord('\u2b50', 'star', Status.FULLY_QUALIFIED, '0.6', '\u2b50', 'Travel & Places', 'sky & weather'),
    '\U0001f31f': EmojiRecord('\U0001f31f', 'glowing star', Status.FULLY_QUALIFIED, '0.6', '\U0001f31f', 'Travel & Places', 'sky & weather'),
    '\U0001f320': EmojiRecord('\U0001f320', 'shooting star', Status.FULLY_QUALIFIED, '0.6', '\U0001f320', 'Travel & Places', 'sky & weather'),
    '\U0001f30c': EmojiRecord('\U0001f30c', 'milky way', Status.FULLY_QUALIFIED, '0.6', '\U0001f30c', 'Travel & Places', 'sky & weather'),
    '\u2601\ufe0f': EmojiRecord('\u2601\ufe0f', 'cloud', Status.FULLY_QUALIFIED, '0.6', '\u2601\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2601': EmojiRecord('\u2601', 'cloud', Status.UNQUALIFIED, '0.6', '\u2601\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u26c5': EmojiRecord('\u26c5', 'sun behind cloud', Status.FULLY_QUALIFIED, '0.6', '\u26c5', 'Travel & Places', 'sky & weather'),
    '\u26c8\ufe0f': EmojiRecord('\u26c8\ufe0f', 'cloud with lightning and rain', Status.FULLY_QUALIFIED, '0.7', '\u26c8\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u26c8': EmojiRecord('\u26c8', 'cloud with lightning and rain', Status.UNQUALIFIED, '0.7', '\u26c8\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f324\ufe0f': EmojiRecord('\U0001f324\ufe0f', 'sun behind small cloud', Status.FULLY_QUALIFIED, '0.7', '\U0001f324\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f324': EmojiRecord('\U0001f324', 'sun behind small cloud', Status.UNQUALIFIED, '0.7', '\U0001f324\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f325\ufe0f': EmojiRecord('\U0001f325\ufe0f', 'sun behind large cloud', Status.FULLY_QUALIFIED, '0.7', '\U0001f325\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f325': EmojiRecord('\U0001f325', 'sun behind large cloud', Status.UNQUALIFIED, '0.7', '\U0001f325\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f326\ufe0f': EmojiRecord('\U0001f326\ufe0f', 'sun behind rain cloud', Status.FULLY_QUALIFIED, '0.7', '\U0001f326\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f326': EmojiRecord('\U0001f326', 'sun behind rain cloud', Status.UNQUALIFIED, '0.7', '\U0001f326\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f327\ufe0f': EmojiRecord('\U0001f327\ufe0f', 'cloud with rain', Status.FULLY_QUALIFIED, '0.7', '\U0001f327\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f327': EmojiRecord('\U0001f327', 'cloud with rain', Status.UNQUALIFIED, '0.7', '\U0001f327\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f328\ufe0f': EmojiRecord('\U0001f328\ufe0f', 'cloud with snow', Status.FULLY_QUALIFIED, '0.7', '\U0001f328\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f328': EmojiRecord('\U0001f328', 'cloud with snow', Status.UNQUALIFIED, '0.7', '\U0001f328\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f329\ufe0f': EmojiRecord('\U0001f329\ufe0f', 'cloud with lightning', Status.FULLY_QUALIFIED, '0.7', '\U0001f329\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f329': EmojiRecord('\U0001f329', 'cloud with lightning', Status.UNQUALIFIED, '0.7', '\U0001f329\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f32a\ufe0f': EmojiRecord('\U0001f32a\ufe0f', 'tornado', Status.FULLY_QUALIFIED, '0.7', '\U0001f32a\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f32a': EmojiRecord('\U0001f32a', 'tornado', Status.UNQUALIFIED, '0.7', '\U0001f32a\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f32b\ufe0f': EmojiRecord('\U0001f32b\ufe0f', 'fog', Status.FULLY_QUALIFIED, '0.7', '\U0001f32b\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f32b': EmojiRecord('\U0001f32b', 'fog', Status.UNQUALIFIED, '0.7', '\U0001f32b\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f32c\ufe0f': EmojiRecord('\U0001f32c\ufe0f', 'wind face', Status.FULLY_QUALIFIED, '0.7', '\U0001f32c\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f32c': EmojiRecord('\U0001f32c', 'wind face', Status.UNQUALIFIED, '0.7', '\U0001f32c\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f300': EmojiRecord('\U0001f300', 'cyclone', Status.FULLY_QUALIFIED, '0.6', '\U0001f300', 'Travel & Places', 'sky & weather'),
    '\U0001f308': EmojiRecord('\U0001f308', 'rainbow', Status.FULLY_QUALIFIED, '0.6', '\U0001f308', 'Travel & Places', 'sky & weather'),
    '\U0001f302': EmojiRecord('\U0001f302', 'closed umbrella', Status.FULLY_QUALIFIED, '0.6', '\U0001f302', 'Travel & Places', 'sky & weather'),
    '\u2602\ufe0f': EmojiRecord('\u2602\ufe0f', 'umbrella', Status.FULLY_QUALIFIED, '0.7', '\u2602\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2602': EmojiRecord('\u2602', 'umbrella', Status.UNQUALIFIED, '0.7', '\u2602\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2614': EmojiRecord('\u2614', 'umbrella with rain drops', Status.FULLY_QUALIFIED, '0.6', '\u2614', 'Travel & Places', 'sky & weather'),
    '\u26f1\ufe0f': EmojiRecord('\u26f1\ufe0f', 'umbrella on ground', Status.FULLY_QUALIFIED, '0.7', '\u26f1\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u26f1': EmojiRecord('\u26f1', 'umbrella on ground', Status.UNQUALIFIED, '0.7', '\u26f1\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u26a1': EmojiRecord('\u26a1', 'high voltage', Status.FULLY_QUALIFIED, '0.6', '\u26a1', 'Travel & Places', 'sky & weather'),
    '\u2744\ufe0f': EmojiRecord('\u2744\ufe0f', 'snowflake', Status.FULLY_QUALIFIED, '0.6', '\u2744\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2744': EmojiRecord('\u2744', 'snowflake', Status.UNQUALIFIED, '0.6', '\u2744\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2603\ufe0f': EmojiRecord('\u2603\ufe0f', 'snowman', Status.FULLY_QUALIFIED, '0.7', '\u2603\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2603': EmojiRecord('\u2603', 'snowman', Status.UNQUALIFIED, '0.7', '\u2603\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u26c4': EmojiRecord('\u26c4', 'snowman without snow', Status.FULLY_QUALIFIED, '0.6', '\u26c4', 'Travel & Places', 'sky & weather'),
    '\u2604\ufe0f': EmojiRecord('\u2604\ufe0f', 'comet', Status.FULLY_QUALIFIED, '1.0', '\u2604\ufe0f', 'Travel & Places', 'sky & weather'),
    '\u2604': EmojiRecord('\u2604', 'comet', Status.UNQUALIFIED, '1.0', '\u2604\ufe0f', 'Travel & Places', 'sky & weather'),
    '\U0001f525': EmojiRecord('\U0001f525', 'fire', Status.FULLY_QUALIFIED, '0.6', '\U0001f525', 'Travel & Places', 'sky & weather'),
    '\U0001f4a7': EmojiRecord('\U0001f4a7', 'droplet', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a7', 'Travel & Places', 'sky & weather'),
    '\U0001f30a': EmojiRecord('\U0001f30a', 'water wave', Status.FULLY_QUALIFIED, '0.6', '\U0001f30a', 'Travel & Places', 'sky & weather'),
    '\U0001f383': EmojiRecord('\U0001f383', 'jack-o-lantern', Status.FULLY_QUALIFIED, '0.6', '\U0001f383', 'Activities', 'event'),
    '\U0001f384': EmojiRecord('\U0001f384', 'Christmas tree', Status.FULLY_QUALIFIED, '0.6', '\U0001f384', 'Activities', 'event'),
    '\U0001f386': EmojiRecord('\U0001f386', 'fireworks', Status.FULLY_QUALIFIED, '0.6', '\U0001f386', 'Activities', 'event'),
    '\U0001f387': EmojiRecord('\U0001f387', 'sparkler', Status.FULLY_QUALIFIED, '0.6', '\U0001f387', 'Activities', 'event'),
    '\U0001f9e8': EmojiRecord('\U0001f9e8', 'firecracker', Status.FULLY_QUALIFIED, '11.0', '\U0001f9e8', 'Activities', 'event'),
    '\u2728': EmojiRecord('\u2728', 'sparkles', Status.FULLY_QUALIFIED, '0.6', '\u2728', 'Activities', 'event'),
    '\U0001f388': EmojiRecord('\U0001f388', 'balloon', Status.FULLY_QUALIFIED, '0.6', '\U0001f388', 'Activities', 'event'),
    '\U0001f389': EmojiRecord('\U0001f389', 'party popper', Status.FULLY_QUALIFIED, '0.6', '\U0001f389', 'Activities', 'event'),
    '\U0001f38a': EmojiRecord('\U0001f38a', 'confetti ball', Status.FULLY_QUALIFIED, '0.6', '\U0001f38a', 'Activities', 'event'),
    '\U0001f38b': EmojiRecord('\U0001f38b', 'tanabata tree', Status.FULLY_QUALIFIED, '0.6', '\U0001f38b', 'Activities', 'event'),
    '\U0001f38d': EmojiRecord('\U0001f38d', 'pine decoration', Status.FULLY_QUALIFIED, '0.6', '\U0001f38d', 'Activities', 'event'),
    '\U0001f38e': EmojiRecord('\U0001f38e', 'Japanese dolls', Status.FULLY_QUALIFIED, '0.6', '\U0001f38e', 'Activities', 'event'),
    '\U0001f38f': EmojiRecord('\U0001f38f', 'carp streamer', Status.FULLY_QUALIFIED, '0.6', '\U0001f38f', 'Activities', 'event'),
    '\U0001f390': EmojiRecord('\U0001f390', 'wind chime', Status.FULLY_QUALIFIED, '0.6', '\U0001f390', 'Activities', 'event'),
    '\U0001f391': EmojiRecord('\U0001f391', 'moon viewing ceremony', Status.FULLY_QUALIFIED, '0.6', '\U0001f391', 'Activities', 'event'),
    '\U0001f9e7': EmojiRecord('\U0001f9e7', 'red envelope', Status.FULLY_QUALIFIED, '11.0', '\U0001f9e7', 'Activities', 'event'),
    '\U0001f380': EmojiRecord('\U0001f380', 'ribbon', Status.FULLY_QUALIFIED, '0.6', '\U0001f380', 'Activities', 'event'),
    '\U0001f381': EmojiRecord('\U0001f381', 'wrapped gift', Status.FULLY_QUALIFIED, '0.6', '\U0001f381', 'Activities', 'event'),
    '\U0001f397\ufe0f': EmojiRecord('\U0001f397\ufe0f', 'reminder ribbon', Status.FULLY_QUALIFIED, '0.7', '\U0001f397\ufe0f', 'Activities', 'event'),
    '\U0001f397': EmojiRecord('\U0001f397', 'reminder ribbon', Status.UNQUALIFIED, '0.7', '\U0001f397\ufe0f', 'Activities', 'event'),
    '\U0001f39f\ufe0f': EmojiRecord('\U0001f39f\ufe0f', 'admission tickets', Status.FULLY_QUALIFIED, '0.7', '\U0001f39f\ufe0f', 'Activities', 'event'),
    '\U0001f39f': EmojiRecord('\U0001f39f', 'admission tickets', Status.UNQUALIFIED, '0.7', '\U0001f39f\ufe0f', 'Activities', 'event'),
    '\U0001f3ab': EmojiRecord('\U0001f3ab', 'ticket', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ab', 'Activities', 'event'),
    '\U0001f396\ufe0f': EmojiRecord('\U0001f396\ufe0f', 'military medal', Status.FULLY_QUALIFIED, '0.7', '\U0001f396\ufe0f', 'Activities', 'award-medal'),
    '\U0001f396': EmojiRecord('\U0001f396', 'military medal', Status.UNQUALIFIED, '0.7', '\U0001f396\ufe0f', 'Activities', 'award-medal'),
    '\U0001f3c6': EmojiRecord('\U0001f3c6', 'trophy', Status.FULLY_QUALIFIED, '0.6', '\U0001f3c6', 'Activities', 'award-medal'),
    '\U0001f3c5': EmojiRecord('\U0001f3c5', 'sports medal', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c5', 'Activities', 'award-medal'),
    '\U0001f947': EmojiRecord('\U0001f947', '1st place medal', Status.FULLY_QUALIFIED, '3.0', '\U0001f947', 'Activities', 'award-medal'),
    '\U0001f948': EmojiRecord('\U0001f948', '2nd place medal', Status.FULLY_QUALIFIED, '3.0', '\U0001f948', 'Activities', 'award-medal'),
    '\U0001f949': EmojiRecord('\U0001f949', '3rd place medal', Status.FULLY_QUALIFIED, '3.0', '\U0001f949', 'Activities', 'award-medal'),
    '\u26bd': EmojiRecord('\u26bd', 'soccer ball', Status.FULLY_QUALIFIED, '0.6', '\u26bd', 'Activities', 'sport'),
    '\u26be': EmojiRecord('\u26be', 'baseball', Status.FULLY_QUALIFIED, '0.6', '\u26be', 'Activities', 'sport'),
    '\U0001f94e': EmojiRecord('\U0001f94e', 'softball', Status.FULLY_QUALIFIED, '11.0', '\U0001f94e', 'Activities', 'sport'),
    '\U0001f3c0': EmojiRecord('\U0001f3c0', 'basketball', Status.FULLY_QUALIFIED, '0.6', '\U0001f3c0', 'Activities', 'sport'),
    '\U0001f3d0': EmojiRecord('\U0001f3d0', 'volleyball', Status.FULLY_QUALIFIED, '1.0', '\U0001f3d0', 'Activities', 'sport'),
    '\U0001f3c8': EmojiRecord('\U0001f3c8', 'american football', Status.FULLY_QUALIFIED, '0.6', '\U0001f3c8', 'Activities', 'sport'),
    '\U0001f3c9': EmojiRecord('\U0001f3c9', 'rugby football', Status.FULLY_QUALIFIED, '1.0', '\U0001f3c9', 'Activities', 'sport'),
    '\U0001f3be': EmojiRecord('\U0001f3be', 'tennis', Status.FULLY_QUALIFIED, '0.6', '\U0001f3be', 'Activities', 'sport'),
    '\U0001f94f': EmojiRecord('\U0001f94f', 'flying disc', Status.FULLY_QUALIFIED, '11.0', '\U0001f94f', 'Activities', 'sport'),
    '\U0001f3b3': EmojiRecord('\U0001f3b3', 'bowling', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b3', 'Activities', 'sport'),
    '\U0001f3cf': EmojiRecord('\U0001f3cf', 'cricket game', Status.FULLY_QUALIFIED, '1.0', '\U0001f3cf', 'Activities', 'sport'),
    '\U0001f3d1': EmojiRecord('\U0001f3d1', 'field hockey', Status.FULLY_QUALIFIED, '1.0', '\U0001f3d1', 'Activities', 'sport'),
    '\U0001f3d2': EmojiRecord('\U0001f3d2', 'ice hockey', Status.FULLY_QUALIFIED, '1.0', '\U0001f3d2', 'Activities', 'sport'),
    '\U0001f94d': EmojiRecord('\U0001f94d', 'lacrosse', Status.FULLY_QUALIFIED, '11.0', '\U0001f94d', 'Activities', 'sport'),
    '\U0001f3d3': EmojiRecord('\U0001f3d3', 'ping pong', Status.FULLY_QUALIFIED, '1.0', '\U0001f3d3', 'Activities', 'sport'),
    '\U0001f3f8': EmojiRecord('\U0001f3f8', 'badminton', Status.FULLY_QUALIFIED, '1.0', '\U0001f3f8', 'Activities', 'sport'),
    '\U0001f94a': EmojiRecord('\U0001f94a', 'boxing glove', Status.FULLY_QUALIFIED, '3.0', '\U0001f94a', 'Activities', 'sport'),
    '\U0001f94b': EmojiRecord('\U0001f94b', 'martial arts uniform', Status.FULLY_QUALIFIED, '3.0', '\U0001f94b', 'Activities', 'sport'),
    '\U0001f945': EmojiRecord('\U0001f945', 'goal net', Status.FULLY_QUALIFIED, '3.0', '\U0001f945', 'Activities', 'sport'),
    '\u26f3': EmojiRecord('\u26f3', 'flag in hole', Status.FULLY_QUALIFIED, '0.6', '\u26f3', 'Activities', 'sport'),
    '\u26f8\ufe0f': EmojiRecord('\u26f8\ufe0f', 'ice skate', Status.FULLY_QUALIFIED, '0.7', '\u26f8\ufe0f', 'Activities', 'sport'),
    '\u26f8': EmojiRecord('\u26f8', 'ice skate', Status.UNQUALIFIED, '0.7', '\u26f8\ufe0f', 'Activities', 'sport'),
    '\U0001f3a3': EmojiRecord('\U0001f3a3', 'fishing pole', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a3', 'Activities', 'sport'),
    '\U0001f93f': EmojiRecord('\U0001f93f', 'diving mask', Status.FULLY_QUALIFIED, '12.0', '\U0001f93f', 'Activities', 'sport'),
    '\U0001f3bd': EmojiRecord('\U0001f3bd', 'running shirt', Status.FULLY_QUALIFIED, '0.6', '\U0001f3bd', 'Activities', 'sport'),
    '\U0001f3bf': EmojiRecord('\U0001f3bf', 'skis', Status.FULLY_QUALIFIED, '0.6', '\U0001f3bf', 'Activities', 'sport'),
    '\U0001f6f7': EmojiRecord('\U0001f6f7', 'sled', Status.FULLY_QUALIFIED, '5.0', '\U0001f6f7', 'Activities', 'sport'),
    '\U0001f94c': EmojiRecord('\U0001f94c', 'curling stone', Status.FULLY_QUALIFIED, '5.0', '\U0001f94c', 'Activities', 'sport'),
    '\U0001f3af': EmojiRecord('\U0001f3af', 'bullseye', Status.FULLY_QUALIFIED, '0.6', '\U0001f3af', 'Activities', 'game'),
    '\U0001fa80': EmojiRecord('\U0001fa80', 'yo-yo', Status.FULLY_QUALIFIED, '12.0', '\U0001fa80', 'Activities', 'game'),
    '\U0001fa81': EmojiRecord('\U0001fa81', 'kite', Status.FULLY_QUALIFIED, '12.0', '\U0001fa81', 'Activities', 'game'),
    '\U0001f52b': EmojiRecord('\U0001f52b', 'water pistol', Status.FULLY_QUALIFIED, '0.6', '\U0001f52b', 'Activities', 'game'),
    '\U0001f3b1': EmojiRecord('\U0001f3b1', 'pool 8 ball', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b1', 'Activities', 'game'),
    '\U0001f52e': EmojiRecord('\U0001f52e', 'crystal ball', Status.FULLY_QUALIFIED, '0.6', '\U0001f52e', 'Activities', 'game'),
    '\U0001fa84': EmojiRecord('\U0001fa84', 'magic wand', Status.FULLY_QUALIFIED, '13.0', '\U0001fa84', 'Activities', 'game'),
    '\U0001f3ae': EmojiRecord('\U0001f3ae', 'video game', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ae', 'Activities', 'game'),
    '\U0001f579\ufe0f': EmojiRecord('\U0001f579\ufe0f', 'joystick', Status.FULLY_QUALIFIED, '0.7', '\U0001f579\ufe0f', 'Activities', 'game'),
    '\U0001f579': EmojiRecord('\U0001f579', 'joystick', Status.UNQUALIFIED, '0.7', '\U0001f579\ufe0f', 'Activities', 'game'),
    '\U0001f3b0': EmojiRecord('\U0001f3b0', 'slot machine', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b0', 'Activities', 'game'),
    '\U0001f3b2': EmojiRecord('\U0001f3b2', 'game die', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b2', 'Activities', 'game'),
    '\U0001f9e9': EmojiRecord('\U0001f9e9', 'puzzle piece', Status.FULLY_QUALIFIED, '11.0', '\U0001f9e9', 'Activities', 'game'),
    '\U0001f9f8': EmojiRecord('\U0001f9f8', 'teddy bear', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f8', 'Activities', 'game'),
    '\U0001fa85': EmojiRecord('\U0001fa85', 'pi\xf1ata', Status.FULLY_QUALIFIED, '13.0', '\U0001fa85', 'Activities', 'game'),
    '\U0001faa9': EmojiRecord('\U0001faa9', 'mirror ball', Status.FULLY_QUALIFIED, '14.0', '\U0001faa9', 'Activities', 'game'),
    '\U0001fa86': EmojiRecord('\U0001fa86', 'nesting dolls', Status.FULLY_QUALIFIED, '13.0', '\U0001fa86', 'Activities', 'game'),
    '\u2660\ufe0f': EmojiRecord('\u2660\ufe0f', 'spade suit', Status.FULLY_QUALIFIED, '0.6', '\u2660\ufe0f', 'Activities', 'game'),
    '\u2660': EmojiRecord('\u2660', 'spade suit', Status.UNQUALIFIED, '0.6', '\u2660\ufe0f', 'Activities', 'game'),
    '\u2665\ufe0f': EmojiRecord('\u2665\ufe0f', 'heart suit', Status.FULLY_QUALIFIED, '0.6', '\u2665\ufe0f', 'Activities', 'game'),
    '\u2665': EmojiRecord('\u2665', 'heart suit', Status.UNQUALIFIED, '0.6', '\u2665\ufe0f', 'Activities', 'game'),
    '\u2666\ufe0f': EmojiRecord('\u2666\ufe0f', 'diamond suit', Status.FULLY_QUALIFIED, '0.6', '\u2666\ufe0f', 'Activities', 'game'),
    '\u2666': EmojiRecord('\u2666', 'diamond suit', Status.UNQUALIFIED, '0.6', '\u2666\ufe0f', 'Activities', 'game'),
    '\u2663\ufe0f': EmojiRecord('\u2663\ufe0f', 'club suit', Status.FULLY_QUALIFIED, '0.6', '\u2663\ufe0f', 'Activities', 'game'),
    '\u2663': EmojiRecord('\u2663', 'club suit', Status.UNQUALIFIED, '0.6', '\u2663\ufe0f', 'Activities', 'game'),
    '\u265f\ufe0f': EmojiRecord('\u265f\ufe0f', 'chess pawn', Status.FULLY_QUALIFIED, '11.0', '\u265f\ufe0f', 'Activities', 'game'),
    '\u265f': EmojiRecord('\u265f', 'chess pawn', Status.UNQUALIFIED, '11.0', '\u265f\ufe0f', 'Activities', 'game'),
    '\U0001f0cf': EmojiRecord('\U0001f0cf', 'joker', Status.FULLY_QUALIFIED, '0.6', '\U0001f0cf', 'Activities', 'game'),
    '\U0001f004': EmojiRecord('\U0001f004', 'mahjong red dragon', Status.FULLY_QUALIFIED, '0.6', '\U0001f004', 'Activities', 'game'),
    '\U0001f3b4': EmojiRecord('\U0001f3b4', 'flower playing cards', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b4', 'Activities', 'game'),
    '\U0001f3ad': EmojiRecord('\U0001f3ad', 'performing arts', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ad', 'Activities', 'arts & crafts'),
    '\U0001f5bc\ufe0f': EmojiRecord('\U0001f5bc\ufe0f', 'framed picture', Status.FULLY_QUALIFIED, '0.7', '\U0001f5bc\ufe0f', 'Activities', 'arts & crafts'),
    '\U0001f5bc': EmojiRecord('\U0001f5bc', 'framed picture', Status.UNQUALIFIED, '0.7', '\U0001f5bc\ufe0f', 'Activities', 'arts & crafts'),
    '\U0001f3a8': EmojiRecord('\U0001f3a8', 'artist palette', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a8', 'Activities', 'arts & crafts'),
    '\U0001f9f5': EmojiRecord('\U0001f9f5', 'thread', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f5', 'Activities', 'arts & crafts'),
    '\U0001faa1': EmojiRecord('\U0001faa1', 'sewing needle', Status.FULLY_QUALIFIED, '13.0', '\U0001faa1', 'Activities', 'arts & crafts'),
    '\U0001f9f6': EmojiRecord('\U0001f9f6', 'yarn', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f6', 'Activities', 'arts & crafts'),
    '\U0001faa2': EmojiRecord('\U0001faa2', 'knot', Status.FULLY_QUALIFIED, '13.0', '\U0001faa2', 'Activities', 'arts & crafts'),
    '\U0001f453': EmojiRecord('\U0001f453', 'glasses', Status.FULLY_QUALIFIED, '0.6', '\U0001f453', 'Objects', 'clothing'),
    '\U0001f576\ufe0f': EmojiRecord('\U0001f576\ufe0f', 'sunglasses', Status.FULLY_QUALIFIED, '0.7', '\U0001f576\ufe0f', 'Objects', 'clothing'),
    '\U0001f576': EmojiRecord('\U0001f576', 'sunglasses', Status.UNQUALIFIED, '0.7', '\U0001f576\ufe0f', 'Objects', 'clothing'),
    '\U0001f97d': EmojiRecord('\U0001f97d', 'goggles', Status.FULLY_QUALIFIED, '11.0', '\U0001f97d', 'Objects', 'clothing'),
    '\U0001f97c': EmojiRecord('\U0001f97c', 'lab coat', Status.FULLY_QUALIFIED, '11.0', '\U0001f97c', 'Objects', 'clothing'),
    '\U0001f9ba': EmojiRecord('\U0001f9ba', 'safety vest', Status.FULLY_QUALIFIED, '12.0', '\U0001f9ba', 'Objects', 'clothing'),
    '\U0001f454': EmojiRecord('\U0001f454', 'necktie', Status.FULLY_QUALIFIED, '0.6', '\U0001f454', 'Objects', 'clothing'),
    '\U0001f455': EmojiRecord('\U0001f455', 't-shirt', Status.FULLY_QUALIFIED, '0.6', '\U0001f455', 'Objects', 'clothing'),
    '\U0001f456': EmojiRecord('\U0001f456', 'jeans', Status.FULLY_QUALIFIED, '0.6', '\U0001f456', 'Objects', 'clothing'),
    '\U0001f9e3': EmojiRecord('\U0001f9e3', 'scarf', Status.FULLY_QUALIFIED, '5.0', '\U0001f9e3', 'Objects', 'clothing'),
    '\U0001f9e4': EmojiRecord('\U0001f9e4', 'gloves', Status.FULLY_QUALIFIED, '5.0', '\U0001f9e4', 'Objects', 'clothing'),
    '\U0001f9e5': EmojiRecord('\U0001f9e5', 'coat', Status.FULLY_QUALIFIED, '5.0', '\U0001f9e5', 'Objects', 'clothing'),
    '\U0001f9e6': EmojiRecord('\U0001f9e6', 'socks', Status.FULLY_QUALIFIED, '5.0', '\U0001f9e6', 'Objects', 'clothing'),
    '\U0001f457': EmojiRecord('\U0001f457', 'dress', Status.FULLY_QUALIFIED, '0.6', '\U0001f457', 'Objects', 'clothing'),
    '\U0001f458': EmojiRecord('\U0001f458', 'kimono', Status.FULLY_QUALIFIED, '0.6', '\U0001f458', 'Objects', 'clothing'),
    '\U0001f97b': EmojiRecord('\U0001f97b', 'sari', Status.FULLY_QUALIFIED, '12.0', '\U0001f97b', 'Objects', 'clothing'),
    '\U0001fa71': EmojiRecord('\U0001fa71', 'one-piece swimsuit', Status.FULLY_QUALIFIED, '12.0', '\U0001fa71', 'Objects', 'clothing'),
    '\U0001fa72': EmojiRecord('\U0001fa72', 'briefs', Status.FULLY_QUALIFIED, '12.0', '\U0001fa72', 'Objects', 'clothing'),
    '\U0001fa73': EmojiRecord('\U0001fa73', 'shorts', Status.FULLY_QUALIFIED, '12.0', '\U0001fa73', 'Objects', 'clothing'),
    '\U0001f459': EmojiRecord('\U0001f459', 'bikini', Status.FULLY_QUALIFIED, '0.6', '\U0001f459', 'Objects', 'clothing'),
    '\U0001f45a': EmojiRecord('\U0001f45a', 'woman\u2019s clothes', Status.FULLY_QUALIFIED, '0.6', '\U0001f45a', 'Objects', 'clothing'),
    '\U0001faad': EmojiRecord('\U0001faad', 'folding hand fan', Status.FULLY_QUALIFIED, '15.0', '\U0001faad', 'Objects', 'clothing'),
    '\U0001f45b': EmojiRecord('\U0001f45b', 'purse', Status.FULLY_QUALIFIED, '0.6', '\U0001f45b', 'Objects', 'clothing'),
    '\U0001f45c': EmojiRecord('\U0001f45c', 'handbag', Status.FULLY_QUALIFIED, '0.6', '\U0001f45c', 'Objects', 'clothing'),
    '\U0001f45d': EmojiRecord('\U0001f45d', 'clutch bag', Status.FULLY_QUALIFIED, '0.6', '\U0001f45d', 'Objects', 'clothing'),
    '\U0001f6cd\ufe0f': EmojiRecord('\U0001f6cd\ufe0f', 'shopping bags', Status.FULLY_QUALIFIED, '0.7', '\U0001f6cd\ufe0f', 'Objects', 'clothing'),
    '\U0001f6cd': EmojiRecord('\U0001f6cd', 'shopping bags', Status.UNQUALIFIED, '0.7', '\U0001f6cd\ufe0f', 'Objects', 'clothing'),
    '\U0001f392': EmojiRecord('\U0001f392', 'backpack', Status.FULLY_QUALIFIED, '0.6', '\U0001f392', 'Objects', 'clothing'),
    '\U0001fa74': EmojiRecord('\U0001fa74', 'thong sandal', Status.FULLY_QUALIFIED, '13.0', '\U0001fa74', 'Objects', 'clothing'),
    '\U0001f45e': EmojiRecord('\U0001f45e', 'man\u2019s shoe', Status.FULLY_QUALIFIED, '0.6', '\U0001f45e', 'Objects', 'clothing'),
    '\U0001f45f': EmojiRecord('\U0001f45f', 'running shoe', Status.FULLY_QUALIFIED, '0.6', '\U0001f45f', 'Objects', 'clothing'),
    '\U0001f97e': EmojiRecord('\U0001f97e', 'hiking boot', Status.FULLY_QUALIFIED, '11.0', '\U0001f97e', 'Objects', 'clothing'),
    '\U0001f97f': EmojiRecord('\U0001f97f', 'flat shoe', Status.FULLY_QUALIFIED, '11.0', '\U0001f97f', 'Objects', 'clothing'),
    '\U0001f460': EmojiRecord('\U0001f460', 'high-heeled shoe', Status.FULLY_QUALIFIED, '0.6', '\U0001f460', 'Objects', 'clothing'),
    '\U0001f461': EmojiRecord('\U0001f461', 'woman\u2019s sandal', Status.FULLY_QUALIFIED, '0.6', '\U0001f461', 'Objects', 'clothing'),
    '\U0001fa70': EmojiRecord('\U0001fa70', 'ballet shoes', Status.FULLY_QUALIFIED, '12.0', '\U0001fa70', 'Objects', 'clothing'),
    '\U0001f462': EmojiRecord('\U0001f462', 'woman\u2019s boot', Status.FULLY_QUALIFIED, '0.6', '\U0001f462', 'Objects', 'clothing'),
    '\U0001faae': EmojiRecord('\U0001faae', 'hair pick', Status.FULLY_QUALIFIED, '15.0', '\U0001faae', 'Objects', 'clothing'),
    '\U0001f451': EmojiRecord('\U0001f451', 'crown', Status.FULLY_QUALIFIED, '0.6', '\U0001f451', 'Objects', 'clothing'),
    '\U0001f452': EmojiRecord('\U0001f452', 'woman\u2019s hat', Status.FULLY_QUALIFIED, '0.6', '\U0001f452', 'Objects', 'clothing'),
    '\U0001f3a9': EmojiRecord('\U0001f3a9', 'top hat', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a9', 'Objects', 'clothing'),
    '\U0001f393': EmojiRecord('\U0001f393', 'graduation cap', Status.FULLY_QUALIFIED, '0.6', '\U0001f393', 'Objects', 'clothing'),
    '\U0001f9e2': EmojiRecord('\U0001f9e2', 'billed cap', Status.FULLY_QUALIFIED, '5.0', '\U0001f9e2', 'Objects', 'clothing'),
    '\U0001fa96': EmojiRecord('\U0001fa96', 'military helmet', Status.FULLY_QUALIFIED, '13.0', '\U0001fa96', 'Objects', 'clothing'),
    '\u26d1\ufe0f': EmojiRecord('\u26d1\ufe0f', 'rescue worker\u2019s helmet', Status.FULLY_QUALIFIED, '0.7', '\u26d1\ufe0f', 'Objects', 'clothing'),
    '\u26d1': EmojiRecord('\u26d1', 'rescue worker\u2019s helmet', Status.UNQUALIFIED, '0.7', '\u26d1\ufe0f', 'Objects', 'clothing'),
    '\U0001f4ff': EmojiRecord('\U0001f4ff', 'prayer beads', Status.FULLY_QUALIFIED, '1.0', '\U0001f4ff', 'Objects', 'clothing'),
    '\U0001f484': EmojiRecord('\U0001f484', 'lipstick', Status.FULLY_QUALIFIED, '0.6', '\U0001f484', 'Objects', 'clothing'),
    '\U0001f48d': EmojiRecord('\U0001f48d', 'ring', Status.FULLY_QUALIFIED, '0.6', '\U0001f48d', 'Objects', 'clothing'),
    '\U0001f48e': EmojiRecord('\U0001f48e', 'gem stone', Status.FULLY_QUALIFIED, '0.6', '\U0001f48e', 'Objects', 'clothing'),
    '\U0001f507': EmojiRecord('\U0001f507', 'muted speaker', Status.FULLY_QUALIFIED, '1.0', '\U0001f507', 'Objects', 'sound'),
    '\U0001f508': EmojiRecord('\U0001f508', 'speaker low volume', Status.FULLY_QUALIFIED, '0.7', '\U0001f508', 'Objects', 'sound'),
    '\U0001f509': EmojiRecord('\U0001f509', 'speaker medium volume', Status.FULLY_QUALIFIED, '1.0', '\U0001f509', 'Objects', 'sound'),
    '\U0001f50a': EmojiRecord('\U0001f50a', 'speaker high volume', Status.FULLY_QUALIFIED, '0.6', '\U0001f50a', 'Objects', 'sound'),
    '\U0001f4e2': EmojiRecord('\U0001f4e2', 'loudspeaker', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e2', 'Objects', 'sound'),
    '\U0001f4e3': EmojiRecord('\U0001f4e3', 'megaphone', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e3', 'Objects', 'sound'),
    '\U0001f4ef': EmojiRecord('\U0001f4ef', 'postal horn', Status.FULLY_QUALIFIED, '1.0', '\U0001f4ef', 'Objects', 'sound'),
    '\U0001f514': EmojiRecord('\U0001f514', 'bell', Status.FULLY_QUALIFIED, '0.6', '\U0001f514', 'Objects', 'sound'),
    '\U0001f515': EmojiRecord('\U0001f515', 'bell with slash', Status.FULLY_QUALIFIED, '1.0', '\U0001f515', 'Objects', 'sound'),
    '\U0001f3bc': EmojiRecord('\U0001f3bc', 'musical score', Status.FULLY_QUALIFIED, '0.6', '\U0001f3bc', 'Objects', 'music'),
    '\U0001f3b5': EmojiRecord('\U0001f3b5', 'musical note', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b5', 'Objects', 'music'),
    '\U0001f3b6': EmojiRecord('\U0001f3b6', 'musical notes', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b6', 'Objects', 'music'),
    '\U0001f399\ufe0f': EmojiRecord('\U0001f399\ufe0f', 'studio microphone', Status.FULLY_QUALIFIED, '0.7', '\U0001f399\ufe0f', 'Objects', 'music'),
    '\U0001f399': EmojiRecord('\U0001f399', 'studio microphone', Status.UNQUALIFIED, '0.7', '\U0001f399\ufe0f', 'Objects', 'music'),
    '\U0001f39a\ufe0f': EmojiRecord('\U0001f39a\ufe0f', 'level slider', Status.FULLY_QUALIFIED, '0.7', '\U0001f39a\ufe0f', 'Objects', 'music'),
    '\U0001f39a': EmojiRecord('\U0001f39a', 'level slider', Status.UNQUALIFIED, '0.7', '\U0001f39a\ufe0f', 'Objects', 'music'),
    '\U0001f39b\ufe0f': EmojiRecord('\U0001f39b\ufe0f', 'control knobs', Status.FULLY_QUALIFIED, '0.7', '\U0001f39b\ufe0f', 'Objects', 'music'),
    '\U0001f39b': EmojiRecord('\U0001f39b', 'control knobs', Status.UNQUALIFIED, '0.7', '\U0001f39b\ufe0f', 'Objects', 'music'),
    '\U0001f3a4': EmojiRecord('\U0001f3a4', 'microphone', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a4', 'Objects', 'music'),
    '\U0001f3a7': EmojiRecord('\U0001f3a7', 'headphone', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a7', 'Objects', 'music'),
    '\U0001f4fb': EmojiRecord('\U0001f4fb', 'radio', Status.FULLY_QUALIFIED, '0.6', '\U0001f4fb', 'Objects', 'music'),
    '\U0001f3b7': EmojiRecord('\U0001f3b7', 'saxophone', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b7', 'Objects', 'musical-instrument'),
    '\U0001fa97': EmojiRecord('\U0001fa97', 'accordion', Status.FULLY_QUALIFIED, '13.0', '\U0001fa97', 'Objects', 'musical-instrument'),
    '\U0001f3b8': EmojiRecord('\U0001f3b8', 'guitar', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b8', 'Objects', 'musical-instrument'),
    '\U0001f3b9': EmojiRecord('\U0001f3b9', 'musical keyboard', Status.FULLY_QUALIFIED, '0.6', '\U0001f3b9', 'Objects', 'musical-instrument'),
    '\U0001f3ba': EmojiRecord('\U0001f3ba', 'trumpet', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ba', 'Objects', 'musical-instrument'),
    '\U0001f3bb': EmojiRecord('\U0001f3bb', 'violin', Status.FULLY_QUALIFIED, '0.6', '\U0001f3bb', 'Objects', 'musical-instrument'),
    '\U0001fa95': EmojiRecord('\U0001fa95', 'banjo', Status.FULLY_QUALIFIED, '12.0', '\U0001fa95', 'Objects', 'musical-instrument'),
    '\U0001f941': EmojiRecord('\U0001f941', 'drum', Status.FULLY_QUALIFIED, '3.0', '\U0001f941', 'Objects', 'musical-instrument'),
    '\U0001fa98': EmojiRecord('\U0001fa98', 'long drum', Status.FULLY_QUALIFIED, '13.0', '\U0001fa98', 'Objects', 'musical-instrument'),
    '\U0001fa87': EmojiRecord('\U0001fa87', 'maracas', Status.FULLY_QUALIFIED, '15.0', '\U0001fa87', 'Objects', 'musical-instrument'),
    '\U0001fa88': EmojiRecord('\U0001fa88', 'flute', Status.FULLY_QUALIFIED, '15.0', '\U0001fa88', 'Objects', 'musical-instrument'),
    '\U0001f4f1': EmojiRecord('\U0001f4f1', 'mobile phone', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f1', 'Objects', 'phone'),
    '\U0001f4f2': EmojiRecord('\U0001f4f2', 'mobile phone with arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f2', 'Objects', 'phone'),
    '\u260e\ufe0f': EmojiRecord('\u260e\ufe0f', 'telephone', Status.FULLY_QUALIFIED, '0.6', '\u260e\ufe0f', 'Objects', 'phone'),
    '\u260e': EmojiRecord('\u260e', 'telephone', Status.UNQUALIFIED, '0.6', '\u260e\ufe0f', 'Objects', 'phone'),
    '\U0001f4de': EmojiRecord('\U0001f4de', 'telephone receiver', Status.FULLY_QUALIFIED, '0.6', '\U0001f4de', 'Objects', 'phone'),
    '\U0001f4df': EmojiRecord('\U0001f4df', 'pager', Status.FULLY_QUALIFIED, '0.6', '\U0001f4df', 'Objects', 'phone'),
    '\U0001f4e0': EmojiRecord('\U0001f4e0', 'fax machine', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e0', 'Objects', 'phone'),
    '\U0001f50b': EmojiRecord('\U0001f50b', 'battery', Status.FULLY_QUALIFIED, '0.6', '\U0001f50b', 'Objects', 'computer'),
    '\U0001faab': EmojiRecord('\U0001faab', 'low battery', Status.FULLY_QUALIFIED, '14.0', '\U0001faab', 'Objects', 'computer'),
    '\U0001f50c': EmojiRecord('\U0001f50c', 'electric plug', Status.FULLY_QUALIFIED, '0.6', '\U0001f50c', 'Objects', 'computer'),
    '\U0001f4bb': EmojiRecord('\U0001f4bb', 'laptop', Status.FULLY_QUALIFIED, '0.6', '\U0001f4bb', 'Objects', 'computer'),
    '\U0001f5a5\ufe0f': EmojiRecord('\U0001f5a5\ufe0f', 'desktop computer', Status.FULLY_QUALIFIED, '0.7', '\U0001f5a5\ufe0f', 'Objects', 'computer'),
    '\U0001f5a5': EmojiRecord('\U0001f5a5', 'desktop computer', Status.UNQUALIFIED, '0.7', '\U0001f5a5\ufe0f', 'Objects', 'computer'),
    '\U0001f5a8\ufe0f': EmojiRecord('\U0001f5a8\ufe0f', 'printer', Status.FULLY_QUALIFIED, '0.7', '\U0001f5a8\ufe0f', 'Objects', 'computer'),
    '\U0001f5a8': EmojiRecord('\U0001f5a8', 'printer', Status.UNQUALIFIED, '0.7', '\U0001f5a8\ufe0f', 'Objects', 'computer'),
    '\u2328\ufe0f': EmojiRecord('\u2328\ufe0f', 'keyboard', Status.FULLY_QUALIFIED, '1.0', '\u2328\ufe0f', 'Objects', 'computer'),
    '\u2328': EmojiRecord('\u2328', 'keyboard', Status.UNQUALIFIED, '1.0', '\u2328\ufe0f', 'Objects', 'computer'),
    '\U0001f5b1\ufe0f': EmojiRecord('\U0001f5b1\ufe0f', 'computer mouse', Status.FULLY_QUALIFIED, '0.7', '\U0001f5b1\ufe0f', 'Objects', 'computer'),
    '\U0001f5b1': EmojiRecord('\U0001f5b1', 'computer mouse', Status.UNQUALIFIED, '0.7', '\U0001f5b1\ufe0f', 'Objects', 'computer'),
    '\U0001f5b2\ufe0f': EmojiRecord('\U0001f5b2\ufe0f', 'trackball', Status.FULLY_QUALIFIED, '0.7', '\U0001f5b2\ufe0f', 'Objects', 'computer'),
    '\U0001f5b2': EmojiRecord('\U0001f5b2', 'trackball', Status.UNQUALIFIED, '0.7', '\U0001f5b2\ufe0f', 'Objects', 'computer'),
    '\U0001f4bd': EmojiRecord('\U0001f4bd', 'computer disk', Status.FULLY_QUALIFIED, '0.6', '\U0001f4bd', 'Objects', 'computer'),
    '\U0001f4be': EmojiRecord('\U0001f4be', 'floppy disk', Status.FULLY_QUALIFIED, '0.6', '\U0001f4be', 'Objects', 'computer'),
    '\U0001f4bf': EmojiRecord('\U0001f4bf', 'optical disk', Status.FULLY_QUALIFIED, '0.6', '\U0001f4bf', 'Objects', 'computer'),
    '\U0001f4c0': EmojiRecord('\U0001f4c0', 'dvd', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c0', 'Objects', 'computer'),
    '\U0001f9ee': EmojiRecord('\U0001f9ee', 'abacus', Status.FULLY_QUALIFIED, '11.0', '\U0001f9ee', 'Objects', 'computer'),
    '\U0001f3a5': EmojiRecord('\U0001f3a5', 'movie camera', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a5', 'Objects', 'light & video'),
    '\U0001f39e\ufe0f': EmojiRecord('\U0001f39e\ufe0f', 'film frames', Status.FULLY_QUALIFIED, '0.7', '\U0001f39e\ufe0f', 'Objects', 'light & video'),
    '\U0001f39e': EmojiRecord('\U0001f39e', 'film frames', Status.UNQUALIFIED, '0.7', '\U0001f39e\ufe0f', 'Objects', 'light & video'),
    '\U0001f4fd\ufe0f': EmojiRecord('\U0001f4fd\ufe0f', 'film projector', Status.FULLY_QUALIFIED, '0.7', '\U0001f4fd\ufe0f', 'Objects', 'light & video'),
    '\U0001f4fd': EmojiRecord('\U0001f4fd', 'film projector', Status.UNQUALIFIED, '0.7', '\U0001f4fd\ufe0f', 'Objects', 'light & video'),
    '\U0001f3ac': EmojiRecord('\U0001f3ac', 'clapper board', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ac', 'Objects', 'light & video'),
    '\U0001f4fa': EmojiRecord('\U0001f4fa', 'television', Status.FULLY_QUALIFIED, '0.6', '\U0001f4fa', 'Objects', 'light & video'),
    '\U0001f4f7': EmojiRecord('\U0001f4f7', 'camera', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f7', 'Objects', 'light & video'),
    '\U0001f4f8': EmojiRecord('\U0001f4f8', 'camera with flash', Status.FULLY_QUALIFIED, '1.0', '\U0001f4f8', 'Objects', 'light & video'),
    '\U0001f4f9': EmojiRecord('\U0001f4f9', 'video camera', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f9', 'Objects', 'light & video'),
    '\U0001f4fc': EmojiRecord('\U0001f4fc', 'videocassette', Status.FULLY_QUALIFIED, '0.6', '\U0001f4fc', 'Objects', 'light & video'),
    '\U0001f50d': EmojiRecord('\U0001f50d', 'magnifying glass tilted left', Status.FULLY_QUALIFIED, '0.6', '\U0001f50d', 'Objects', 'light & video'),
    '\U0001f50e': EmojiRecord('\U0001f50e', 'magnifying glass tilted right', Status.FULLY_QUALIFIED, '0.6', '\U0001f50e', 'Objects', 'light & video'),
    '\U0001f56f\ufe0f': EmojiRecord('\U0001f56f\ufe0f', 'candle', Status.FULLY_QUALIFIED, '0.7', '\U0001f56f\ufe0f', 'Objects', 'light & video'),
    '\U0001f56f': EmojiRecord('\U0001f56f', 'candle', Status.UNQUALIFIED, '0.7', '\U0001f56f\ufe0f', 'Objects', 'light & video'),
    '\U0001f4a1': EmojiRecord('\U0001f4a1', 'light bulb', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a1', 'Objects', 'light & video'),
    '\U0001f526': EmojiRecord('\U0001f526', 'flashlight', Status.FULLY_QUALIFIED, '0.6', '\U0001f526', 'Objects', 'light & video'),
    '\U0001f3ee': EmojiRecord('\U0001f3ee', 'red paper lantern', Status.FULLY_QUALIFIED, '0.6', '\U0001f3ee', 'Objects', 'light & video'),
    '\U0001fa94': EmojiRecord('\U0001fa94', 'diya lamp', Status.FULLY_QUALIFIED, '12.0', '\U0001fa94', 'Objects', 'light & video'),
    '\U0001f4d4': EmojiRecord('\U0001f4d4', 'notebook with decorative cover', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d4', 'Objects', 'book-paper'),
    '\U0001f4d5': EmojiRecord('\U0001f4d5', 'closed book', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d5', 'Objects', 'book-paper'),
    '\U0001f4d6': EmojiRecord('\U0001f4d6', 'open book', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d6', 'Objects', 'book-paper'),
    '\U0001f4d7': EmojiRecord('\U0001f4d7', 'green book', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d7', 'Objects', 'book-paper'),
    '\U0001f4d8': EmojiRecord('\U0001f4d8', 'blue book', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d8', 'Objects', 'book-paper'),
    '\U0001f4d9': EmojiRecord('\U0001f4d9', 'orange book', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d9', 'Objects', 'book-paper'),
    '\U0001f4da': EmojiRecord('\U0001f4da', 'books', Status.FULLY_QUALIFIED, '0.6', '\U0001f4da', 'Objects', 'book-paper'),
    '\U0001f4d3': EmojiRecord('\U0001f4d3', 'notebook', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d3', 'Objects', 'book-paper'),
    '\U0001f4d2': EmojiRecord('\U0001f4d2', 'ledger', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d2', 'Objects', 'book-paper'),
    '\U0001f4c3': EmojiRecord('\U0001f4c3', 'page with curl', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c3', 'Objects', 'book-paper'),
    '\U0001f4dc': EmojiRecord('\U0001f4dc', 'scroll', Status.FULLY_QUALIFIED, '0.6', '\U0001f4dc', 'Objects', 'book-paper'),
    '\U0001f4c4': EmojiRecord('\U0001f4c4', 'page facing up', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c4', 'Objects', 'book-paper'),
    '\U0001f4f0': EmojiRecord('\U0001f4f0', 'newspaper', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f0', 'Objects', 'book-paper'),
    '\U0001f5de\ufe0f': EmojiRecord('\U0001f5de\ufe0f', 'rolled-up newspaper', Status.FULLY_QUALIFIED, '0.7', '\U0001f5de\ufe0f', 'Objects', 'book-paper'),
    '\U0001f5de': EmojiRecord('\U0001f5de', 'rolled-up newspaper', Status.UNQUALIFIED, '0.7', '\U0001f5de\ufe0f', 'Objects', 'book-paper'),
    '\U0001f4d1': EmojiRecord('\U0001f4d1', 'bookmark tabs', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d1', 'Objects', 'book-paper'),
    '\U0001f516': EmojiRecord('\U0001f516', 'bookmark', Status.FULLY_QUALIFIED, '0.6', '\U0001f516', 'Objects', 'book-paper'),
    '\U0001f3f7\ufe0f': EmojiRecord('\U0001f3f7\ufe0f', 'label', Status.FULLY_QUALIFIED, '0.7', '\U0001f3f7\ufe0f', 'Objects', 'book-paper'),
    '\U0001f3f7': EmojiRecord('\U0001f3f7', 'label', Status.UNQUALIFIED, '0.7', '\U0001f3f7\ufe0f', 'Objects', 'book-paper'),
    '\U0001f4b0': EmojiRecord('\U0001f4b0', 'money bag', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b0', 'Objects', 'money'),
    '\U0001fa99': EmojiRecord('\U0001fa99', 'coin', Status.FULLY_QUALIFIED, '13.0', '\U0001fa99', 'Objects', 'money'),
    '\U0001f4b4': EmojiRecord('\U0001f4b4', 'yen banknote', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b4', 'Objects', 'money'),
    '\U0001f4b5': EmojiRecord('\U0001f4b5', 'dollar banknote', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b5', 'Objects', 'money'),
    '\U0001f4b6': EmojiRecord('\U0001f4b6', 'euro banknote', Status.FULLY_QUALIFIED, '1.0', '\U0001f4b6', 'Objects', 'money'),
    '\U0001f4b7': EmojiRecord('\U0001f4b7', 'pound banknote', Status.FULLY_QUALIFIED, '1.0', '\U0001f4b7', 'Objects', 'money'),
    '\U0001f4b8': EmojiRecord('\U0001f4b8', 'money with wings', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b8', 'Objects', 'money'),
    '\U0001f4b3': EmojiRecord('\U0001f4b3', 'credit card', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b3', 'Objects', 'money'),
    '\U0001f9fe': EmojiRecord('\U0001f9fe', 'receipt', Status.FULLY_QUALIFIED, '11.0', '\U0001f9fe', 'Objects', 'money'),
    '\U0001f4b9': EmojiRecord('\U0001f4b9', 'chart increasing with yen', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b9', 'Objects', 'money'),
    '\u2709\ufe0f': EmojiRecord('\u2709\ufe0f', 'envelope', Status.FULLY_QUALIFIED, '0.6', '\u2709\ufe0f', 'Objects', 'mail'),
    '\u2709': EmojiRecord('\u2709', 'envelope', Status.UNQUALIFIED, '0.6', '\u2709\ufe0f', 'Objects', 'mail'),
    '\U0001f4e7': EmojiRecord('\U0001f4e7', 'e-mail', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e7', 'Objects', 'mail'),
    '\U0001f4e8': EmojiRecord('\U0001f4e8', 'incoming envelope', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e8', 'Objects', 'mail'),
    '\U0001f4e9': EmojiRecord('\U0001f4e9', 'envelope with arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e9', 'Objects', 'mail'),
    '\U0001f4e4': EmojiRecord('\U0001f4e4', 'outbox tray', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e4', 'Objects', 'mail'),
    '\U0001f4e5': EmojiRecord('\U0001f4e5', 'inbox tray', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e5', 'Objects', 'mail'),
    '\U0001f4e6': EmojiRecord('\U0001f4e6', 'package', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e6', 'Objects', 'mail'),
    '\U0001f4eb': EmojiRecord('\U0001f4eb', 'closed mailbox with raised flag', Status.FULLY_QUALIFIED, '0.6', '\U0001f4eb', 'Objects', 'mail'),
    '\U0001f4ea': EmojiRecord('\U0001f4ea', 'closed mailbox with lowered flag', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ea', 'Objects', 'mail'),
    '\U0001f4ec': EmojiRecord('\U0001f4ec', 'open mailbox with raised flag', Status.FULLY_QUALIFIED, '0.7', '\U0001f4ec', 'Objects', 'mail'),
    '\U0001f4ed': EmojiRecord('\U0001f4ed', 'open mailbox with lowered flag', Status.FULLY_QUALIFIED, '0.7', '\U0001f4ed', 'Objects', 'mail'),
    '\U0001f4ee': EmojiRecord('\U0001f4ee', 'postbox', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ee', 'Objects', 'mail'),
    '\U0001f5f3\ufe0f': EmojiRecord('\U0001f5f3\ufe0f', 'ballot box with ballot', Status.FULLY_QUALIFIED, '0.7', '\U0001f5f3\ufe0f', 'Objects', 'mail'),
    '\U0001f5f3': EmojiRecord('\U0001f5f3', 'ballot box with ballot', Status.UNQUALIFIED, '0.7', '\U0001f5f3\ufe0f', 'Objects', 'mail'),
    '\u270f\ufe0f': EmojiRecord('\u270f\ufe0f', 'pencil', Status.FULLY_QUALIFIED, '0.6', '\u270f\ufe0f', 'Objects', 'writing'),
    '\u270f': EmojiRecord('\u270f', 'pencil', Status.UNQUALIFIED, '0.6', '\u270f\ufe0f', 'Objects', 'writing'),
    '\u2712\ufe0f': EmojiRecord('\u2712\ufe0f', 'black nib', Status.FULLY_QUALIFIED, '0.6', '\u2712\ufe0f', 'Objects', 'writing'),
    '\u2712': EmojiRecord('\u2712', 'black nib', Status.UNQUALIFIED, '0.6', '\u2712\ufe0f', 'Objects', 'writing'),
    '\U0001f58b\ufe0f': EmojiRecord('\U0001f58b\ufe0f', 'fountain pen', Status.FULLY_QUALIFIED, '0.7', '\U0001f58b\ufe0f', 'Objects', 'writing'),
    '\U0001f58b': EmojiRecord('\U0001f58b', 'fountain pen', Status.UNQUALIFIED, '0.7', '\U0001f58b\ufe0f', 'Objects', 'writing'),
    '\U0001f58a\ufe0f': EmojiRecord('\U0001f58a\ufe0f', 'pen', Status.FULLY_QUALIFIED, '0.7', '\U0001f58a\ufe0f', 'Objects', 'writing'),
    '\U0001f58a': EmojiRecord('\U0001f58a', 'pen', Status.UNQUALIFIED, '0.7', '\U0001f58a\ufe0f', 'Objects', 'writing'),
    '\U0001f58c\ufe0f': EmojiRecord('\U0001f58c\ufe0f', 'paintbrush', Status.FULLY_QUALIFIED, '0.7', '\U0001f58c\ufe0f', 'Objects', 'writing'),
    '\U0001f58c': EmojiRecord('\U0001f58c', 'paintbrush', Status.UNQUALIFIED, '0.7', '\U0001f58c\ufe0f', 'Objects', 'writing'),
    '\U0001f58d\ufe0f': EmojiRecord('\U0001f58d\ufe0f', 'crayon', Status.FULLY_QUALIFIED, '0.7', '\U0001f58d\ufe0f', 'Objects', 'writing'),
    '\U0001f58d': EmojiRecord('\U0001f58d', 'crayon', Status.UNQUALIFIED, '0.7', '\U0001f58d\ufe0f', 'Objects', 'writing'),
    '\U0001f4dd': EmojiRecord('\U0001f4dd', 'memo', Status.FULLY_QUALIFIED, '0.6', '\U0001f4dd', 'Objects', 'writing'),
    '\U0001f4bc': EmojiRecord('\U0001f4bc', 'briefcase', Status.FULLY_QUALIFIED, '0.6', '\U0001f4bc', 'Objects', 'office'),
    '\U0001f4c1': EmojiRecord('\U0001f4c1', 'file folder', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c1', 'Objects', 'office'),
    '\U0001f4c2': EmojiRecord('\U0001f4c2', 'open file folder', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c2', 'Objects', 'office'),
    '\U0001f5c2\ufe0f': EmojiRecord('\U0001f5c2\ufe0f', 'card index dividers', Status.FULLY_QUALIFIED, '0.7', '\U0001f5c2\ufe0f', 'Objects', 'office'),
    '\U0001f5c2': EmojiRecord('\U0001f5c2', 'card index dividers', Status.UNQUALIFIED, '0.7', '\U0001f5c2\ufe0f', 'Objects', 'office'),
    '\U0001f4c5': EmojiRecord('\U0001f4c5', 'calendar', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c5', 'Objects', 'office'),
    '\U0001f4c6': EmojiRecord('\U0001f4c6', 'tear-off calendar', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c6', 'Objects', 'office'),
    '\U0001f5d2\ufe0f': EmojiRecord('\U0001f5d2\ufe0f', 'spiral notepad', Status.FULLY_QUALIFIED, '0.7', '\U0001f5d2\ufe0f', 'Objects', 'office'),
    '\U0001f5d2': EmojiRecord('\U0001f5d2', 'spiral notepad', Status.UNQUALIFIED, '0.7', '\U0001f5d2\ufe0f', 'Objects', 'office'),
    '\U0001f5d3\ufe0f': EmojiRecord('\U0001f5d3\ufe0f', 'spiral calendar', Status.FULLY_QUALIFIED, '0.7', '\U0001f5d3\ufe0f', 'Objects', 'office'),
    '\U0001f5d3': EmojiRecord('\U0001f5d3', 'spiral calendar', Status.UNQUALIFIED, '0.7', '\U0001f5d3\ufe0f', 'Objects', 'office'),
    '\U0001f4c7': EmojiRecord('\U0001f4c7', 'card index', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c7', 'Objects', 'office'),
    '\U0001f4c8': EmojiRecord('\U0001f4c8', 'chart increasing', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c8', 'Objects', 'office'),
    '\U0001f4c9': EmojiRecord('\U0001f4c9', 'chart decreasing', Status.FULLY_QUALIFIED, '0.6', '\U0001f4c9', 'Objects', 'office'),
    '\U0001f4ca': EmojiRecord('\U0001f4ca', 'bar chart', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ca', 'Objects', 'office'),
    '\U0001f4cb': EmojiRecord('\U0001f4cb', 'clipboard', Status.FULLY_QUALIFIED, '0.6', '\U0001f4cb', 'Objects', 'office'),
    '\U0001f4cc': EmojiRecord('\U0001f4cc', 'pushpin', Status.FULLY_QUALIFIED, '0.6', '\U0001f4cc', 'Objects', 'office'),
    '\U0001f4cd': EmojiRecord('\U0001f4cd', 'round pushpin', Status.FULLY_QUALIFIED, '0.6', '\U0001f4cd', 'Objects', 'office'),
    '\U0001f4ce': EmojiRecord('\U0001f4ce', 'paperclip', Status.FULLY_QUALIFIED, '0.6', '\U0001f4ce', 'Objects', 'office'),
    '\U0001f587\ufe0f': EmojiRecord('\U0001f587\ufe0f', 'linked paperclips', Status.FULLY_QUALIFIED, '0.7', '\U0001f587\ufe0f', 'Objects', 'office'),
    '\U0001f587': EmojiRecord('\U0001f587', 'linked paperclips', Status.UNQUALIFIED, '0.7', '\U0001f587\ufe0f', 'Objects', 'office'),
    '\U0001f4cf': EmojiRecord('\U0001f4cf', 'straight ruler', Status.FULLY_QUALIFIED, '0.6', '\U0001f4cf', 'Objects', 'office'),
    '\U0001f4d0': EmojiRecord('\U0001f4d0', 'triangular ruler', Status.FULLY_QUALIFIED, '0.6', '\U0001f4d0', 'Objects', 'office'),
    '\u2702\ufe0f': EmojiRecord('\u2702\ufe0f', 'scissors', Status.FULLY_QUALIFIED, '0.6', '\u2702\ufe0f', 'Objects', 'office'),
    '\u2702': EmojiRecord('\u2702', 'scissors', Status.UNQUALIFIED, '0.6', '\u2702\ufe0f', 'Objects', 'office'),
    '\U0001f5c3\ufe0f': EmojiRecord('\U0001f5c3\ufe0f', 'card file box', Status.FULLY_QUALIFIED, '0.7', '\U0001f5c3\ufe0f', 'Objects', 'office'),
    '\U0001f5c3': EmojiRecord('\U0001f5c3', 'card file box', Status.UNQUALIFIED, '0.7', '\U0001f5c3\ufe0f', 'Objects', 'office'),
    '\U0001f5c4\ufe0f': EmojiRecord('\U0001f5c4\ufe0f', 'file cabinet', Status.FULLY_QUALIFIED, '0.7', '\U0001f5c4\ufe0f', 'Objects', 'office'),
    '\U0001f5c4': EmojiRecord('\U0001f5c4', 'file cabinet', Status.UNQUALIFIED, '0.7', '\U0001f5c4\ufe0f', 'Objects', 'office'),
    '\U0001f5d1\ufe0f': EmojiRecord('\U0001f5d1\ufe0f', 'wastebasket', Status.FULLY_QUALIFIED, '0.7', '\U0001f5d1\ufe0f', 'Objects', 'office'),
    '\U0001f5d1': EmojiRecord('\U0001f5d1', 'wastebasket', Status.UNQUALIFIED, '0.7', '\U0001f5d1\ufe0f', 'Objects', 'office'),
    '\U0001f512': EmojiRecord('\U0001f512', 'locked', Status.FULLY_QUALIFIED, '0.6', '\U0001f512', 'Objects', 'lock'),
    '\U0001f513': EmojiRecord('\U0001f513', 'unlocked', Status.FULLY_QUALIFIED, '0.6', '\U0001f513', 'Objects', 'lock'),
    '\U0001f50f': EmojiRecord('\U0001f50f', 'locked with pen', Status.FULLY_QUALIFIED, '0.6', '\U0001f50f', 'Objects', 'lock'),
    '\U0001f510': EmojiRecord('\U0001f510', 'locked with key', Status.FULLY_QUALIFIED, '0.6', '\U0001f510', 'Objects', 'lock'),
    '\U0001f511': EmojiRecord('\U0001f511', 'key', Status.FULLY_QUALIFIED, '0.6', '\U0001f511', 'Objects', 'lock'),
    '\U0001f5dd\ufe0f': EmojiRecord('\U0001f5dd\ufe0f', 'old key', Status.FULLY_QUALIFIED, '0.7', '\U0001f5dd\ufe0f', 'Objects', 'lock'),
    '\U0001f5dd': EmojiRecord('\U0001f5dd', 'old key', Status.UNQUALIFIED, '0.7', '\U0001f5dd\ufe0f', 'Objects', 'lock'),
    '\U0001f528': EmojiRecord('\U0001f528', 'hammer', Status.FULLY_QUALIFIED, '0.6', '\U0001f528', 'Objects', 'tool'),
    '\U0001fa93': EmojiRecord('\U0001fa93', 'axe', Status.FULLY_QUALIFIED, '12.0', '\U0001fa93', 'Objects', 'tool'),
    '\u26cf\ufe0f': EmojiRecord('\u26cf\ufe0f', 'pick', Status.FULLY_QUALIFIED, '0.7', '\u26cf\ufe0f', 'Objects', 'tool'),
    '\u26cf': EmojiRecord('\u26cf', 'pick', Status.UNQUALIFIED, '0.7', '\u26cf\ufe0f', 'Objects', 'tool'),
    '\u2692\ufe0f': EmojiRecord('\u2692\ufe0f', 'hammer and pick', Status.FULLY_QUALIFIED, '1.0', '\u2692\ufe0f', 'Objects', 'tool'),
    '\u2692': EmojiRecord('\u2692', 'hammer and pick', Status.UNQUALIFIED, '1.0', '\u2692\ufe0f', 'Objects', 'tool'),
    '\U0001f6e0\ufe0f': EmojiRecord('\U0001f6e0\ufe0f', 'hammer and wrench', Status.FULLY_QUALIFIED, '0.7', '\U0001f6e0\ufe0f', 'Objects', 'tool'),
    '\U0001f6e0': EmojiRecord('\U0001f6e0', 'hammer and wrench', Status.UNQUALIFIED, '0.7', '\U0001f6e0\ufe0f', 'Objects', 'tool'),
    '\U0001f5e1\ufe0f': EmojiRecord('\U0001f5e1\ufe0f', 'dagger', Status.FULLY_QUALIFIED, '0.7', '\U0001f5e1\ufe0f', 'Objects', 'tool'),
    '\U0001f5e1': EmojiRecord('\U0001f5e1', 'dagger', Status.UNQUALIFIED, '0.7', '\U0001f5e1\ufe0f', 'Objects', 'tool'),
    '\u2694\ufe0f': EmojiRecord('\u2694\ufe0f', 'crossed swords', Status.FULLY_QUALIFIED, '1.0', '\u2694\ufe0f', 'Objects', 'tool'),
    '\u2694': EmojiRecord('\u2694', 'crossed swords', Status.UNQUALIFIED, '1.0', '\u2694\ufe0f', 'Objects', 'tool'),
    '\U0001f4a3': EmojiRecord('\U0001f4a3', 'bomb', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a3', 'Objects', 'tool'),
    '\U0001fa83': EmojiRecord('\U0001fa83', 'boomerang', Status.FULLY_QUALIFIED, '13.0', '\U0001fa83', 'Objects', 'tool'),
    '\U0001f3f9': EmojiRecord('\U0001f3f9', 'bow and arrow', Status.FULLY_QUALIFIED, '1.0', '\U0001f3f9', 'Objects', 'tool'),
    '\U0001f6e1\ufe0f': EmojiRecord('\U0001f6e1\ufe0f', 'shield', Status.FULLY_QUALIFIED, '0.7', '\U0001f6e1\ufe0f', 'Objects', 'tool'),
    '\U0001f6e1': EmojiRecord('\U0001f6e1', 'shield', Status.UNQUALIFIED, '0.7', '\U0001f6e1\ufe0f', 'Objects', 'tool'),
    '\U0001fa9a': EmojiRecord('\U0001fa9a', 'carpentry saw', Status.FULLY_QUALIFIED, '13.0', '\U0001fa9a', 'Objects', 'tool'),
    '\U0001f527': EmojiRecord('\U0001f527', 'wrench', Status.FULLY_QUALIFIED, '0.6', '\U0001f527', 'Objects', 'tool'),
    '\U0001fa9b': EmojiRecord('\U0001fa9b', 'screwdriver', Status.FULLY_QUALIFIED, '13.0', '\U0001fa9b', 'Objects', 'tool'),
    '\U0001f529': EmojiRecord('\U0001f529', 'nut and bolt', Status.FULLY_QUALIFIED, '0.6', '\U0001f529', 'Objects', 'tool'),
    '\u2699\ufe0f': EmojiRecord('\u2699\ufe0f', 'gear', Status.FULLY_QUALIFIED, '1.0', '\u2699\ufe0f', 'Objects', 'tool'),
    '\u2699': EmojiRecord('\u2699', 'gear', Status.UNQUALIFIED, '1.0', '\u2699\ufe0f', 'Objects', 'tool'),
    '\U0001f5dc\ufe0f': EmojiRecord('\U0001f5dc\ufe0f', 'clamp', Status.FULLY_QUALIFIED, '0.7', '\U0001f5dc\ufe0f', 'Objects', 'tool'),
    '\U0001f5dc': EmojiRecord('\U0001f5dc', 'clamp', Status.UNQUALIFIED, '0.7', '\U0001f5dc\ufe0f', 'Objects', 'tool'),
    '\u2696\ufe0f': EmojiRecord('\u2696\ufe0f', 'balance scale', Status.FULLY_QUALIFIED, '1.0', '\u2696\ufe0f', 'Objects', 'tool'),
    '\u2696': EmojiRecord('\u2696', 'balance scale', Status.UNQUALIFIED, '1.0', '\u2696\ufe0f', 'Objects', 'tool'),
    '\U0001f9af': EmojiRecord('\U0001f9af', 'white cane', Status.FULLY_QUALIFIED, '12.0', '\U0001f9af', 'Objects', 'tool'),
    '\U0001f517': EmojiRecord('\U0001f517', 'link', Status.FULLY_QUALIFIED, '0.6', '\U0001f517', 'Objects', 'tool'),
    '\u26d3\ufe0f\u200d\U0001f4a5': EmojiRecord('\u26d3\ufe0f\u200d\U0001f4a5', 'broken chain', Status.FULLY_QUALIFIED, '15.1', '\u26d3\ufe0f\u200d\U0001f4a5', 'Objects', 'tool'),
    '\u26d3\u200d\U0001f4a5': EmojiRecord('\u26d3\u200d\U0001f4a5', 'broken chain', Status.UNQUALIFIED, '15.1', '\u26d3\ufe0f\u200d\U0001f4a5', 'Objects', 'tool'),
    '\u26d3\ufe0f': EmojiRecord('\u26d3\ufe0f', 'chains', Status.FULLY_QUALIFIED, '0.7', '\u26d3\ufe0f', 'Objects', 'tool'),
    '\u26d3': EmojiRecord('\u26d3', 'chains', Status.UNQUALIFIED, '0.7', '\u26d3\ufe0f', 'Objects', 'tool'),
    '\U0001fa9d': EmojiRecord('\U0001fa9d', 'hook', Status.FULLY_QUALIFIED, '13.0', '\U0001fa9d', 'Objects', 'tool'),
    '\U0001f9f0': EmojiRecord('\U0001f9f0', 'toolbox', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f0', 'Objects', 'tool'),
    '\U0001f9f2': EmojiRecord('\U0001f9f2', 'magnet', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f2', 'Objects', 'tool'),
    '\U0001fa9c': EmojiRecord('\U0001fa9c', 'ladder', Status.FULLY_QUALIFIED, '13.0', '\U0001fa9c', 'Objects', 'tool'),
    '\u2697\ufe0f': EmojiRecord('\u2697\ufe0f', 'alembic', Status.FULLY_QUALIFIED, '1.0', '\u2697\ufe0f', 'Objects', 'science'),
    '\u2697': EmojiRecord('\u2697', 'alembic', Status.UNQUALIFIED, '1.0', '\u2697\ufe0f', 'Objects', 'science'),
    '\U0001f9ea': EmojiRecord('\U0001f9ea', 'test tube', Status.FULLY_QUALIFIED, '11.0', '\U0001f9ea', 'Objects', 'science'),
    '\U0001f9eb': EmojiRecord('\U0001f9eb', 'petri dish', Status.FULLY_QUALIFIED, '11.0', '\U0001f9eb', 'Objects', 'science'),
    '\U0001f9ec': EmojiRecord('\U0001f9ec', 'dna', Status.FULLY_QUALIFIED, '11.0', '\U0001f9ec', 'Objects', 'science'),
    '\U0001f52c': EmojiRecord('\U0001f52c', 'microscope', Status.FULLY_QUALIFIED, '1.0', '\U0001f52c', 'Objects', 'science'),
    '\U0001f52d': EmojiRecord('\U0001f52d', 'telescope', Status.FULLY_QUALIFIED, '1.0', '\U0001f52d', 'Objects', 'science'),
    '\U0001f4e1': EmojiRecord('\U0001f4e1', 'satellite antenna', Status.FULLY_QUALIFIED, '0.6', '\U0001f4e1', 'Objects', 'science'),
    '\U0001f489': EmojiRecord('\U0001f489', 'syringe', Status.FULLY_QUALIFIED, '0.6', '\U0001f489', 'Objects', 'medical'),
    '\U0001fa78': EmojiRecord('\U0001fa78', 'drop of blood', Status.FULLY_QUALIFIED, '12.0', '\U0001fa78', 'Objects', 'medical'),
    '\U0001f48a': EmojiRecord('\U0001f48a', 'pill', Status.FULLY_QUALIFIED, '0.6', '\U0001f48a', 'Objects', 'medical'),
    '\U0001fa79': EmojiRecord('\U0001fa79', 'adhesive bandage', Status.FULLY_QUALIFIED, '12.0', '\U0001fa79', 'Objects', 'medical'),
    '\U0001fa7c': EmojiRecord('\U0001fa7c', 'crutch', Status.FULLY_QUALIFIED, '14.0', '\U0001fa7c', 'Objects', 'medical'),
    '\U0001fa7a': EmojiRecord('\U0001fa7a', 'stethoscope', Status.FULLY_QUALIFIED, '12.0', '\U0001fa7a', 'Objects', 'medical'),
    '\U0001fa7b': EmojiRecord('\U0001fa7b', 'x-ray', Status.FULLY_QUALIFIED, '14.0', '\U0001fa7b', 'Objects', 'medical'),
    '\U0001f6aa': EmojiRecord('\U0001f6aa', 'door', Status.FULLY_QUALIFIED, '0.6', '\U0001f6aa', 'Objects', 'household'),
    '\U0001f6d7': EmojiRecord('\U0001f6d7', 'elevator', Status.FULLY_QUALIFIED, '13.0', '\U0001f6d7', 'Objects', 'household'),
    '\U0001fa9e': EmojiRecord('\U0001fa9e', 'mirror', Status.FULLY_QUALIFIED, '13.0', '\U0001fa9e', 'Objects', 'household'),
    '\U0001fa9f': EmojiRecord('\U0001fa9f', 'window', Status.FULLY_QUALIFIED, '13.0', '\U0001fa9f', 'Objects', 'household'),
    '\U0001f6cf\ufe0f': EmojiRecord('\U0001f6cf\ufe0f', 'bed', Status.FULLY_QUALIFIED, '0.7', '\U0001f6cf\ufe0f', 'Objects', 'household'),
    '\U0001f6cf': EmojiRecord('\U0001f6cf', 'bed', Status.UNQUALIFIED, '0.7', '\U0001f6cf\ufe0f', 'Objects', 'household'),
    '\U0001f6cb\ufe0f': EmojiRecord('\U0001f6cb\ufe0f', 'couch and lamp', Status.FULLY_QUALIFIED, '0.7', '\U0001f6cb\ufe0f', 'Objects', 'household'),
    '\U0001f6cb': EmojiRecord('\U0001f6cb', 'couch and lamp', Status.UNQUALIFIED, '0.7', '\U0001f6cb\ufe0f', 'Objects', 'household'),
    '\U0001fa91': EmojiRecord('\U0001fa91', 'chair', Status.FULLY_QUALIFIED, '12.0', '\U0001fa91', 'Objects', 'household'),
    '\U0001f6bd': EmojiRecord('\U0001f6bd', 'toilet', Status.FULLY_QUALIFIED, '0.6', '\U0001f6bd', 'Objects', 'household'),
    '\U0001faa0': EmojiRecord('\U0001faa0', 'plunger', Status.FULLY_QUALIFIED, '13.0', '\U0001faa0', 'Objects', 'household'),
    '\U0001f6bf': EmojiRecord('\U0001f6bf', 'shower', Status.FULLY_QUALIFIED, '1.0', '\U0001f6bf', 'Objects', 'household'),
    '\U0001f6c1': EmojiRecord('\U0001f6c1', 'bathtub', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c1', 'Objects', 'household'),
    '\U0001faa4': EmojiRecord('\U0001faa4', 'mouse trap', Status.FULLY_QUALIFIED, '13.0', '\U0001faa4', 'Objects', 'household'),
    '\U0001fa92': EmojiRecord('\U0001fa92', 'razor', Status.FULLY_QUALIFIED, '12.0', '\U0001fa92', 'Objects', 'household'),
    '\U0001f9f4': EmojiRecord('\U0001f9f4', 'lotion bottle', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f4', 'Objects', 'household'),
    '\U0001f9f7': EmojiRecord('\U0001f9f7', 'safety pin', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f7', 'Objects', 'household'),
    '\U0001f9f9': EmojiRecord('\U0001f9f9', 'broom', Status.FULLY_QUALIFIED, '11.0', '\U0001f9f9', 'Objects', 'household'),
    '\U0001f9fa': EmojiRecord('\U0001f9fa', 'basket', Status.FULLY_QUALIFIED, '11.0', '\U0001f9fa', 'Objects', 'household'),
    '\U0001f9fb': EmojiRecord('\U0001f9fb', 'roll of paper', Status.FULLY_QUALIFIED, '11.0', '\U0001f9fb', 'Objects', 'household'),
    '\U0001faa3': EmojiRecord('\U0001faa3', 'bucket', Status.FULLY_QUALIFIED, '13.0', '\U0001faa3', 'Objects', 'household'),
    '\U0001f9fc': EmojiRecord('\U0001f9fc', 'soap', Status.FULLY_QUALIFIED, '11.0', '\U0001f9fc', 'Objects', 'household'),
    '\U0001fae7': EmojiRecord('\U0001fae7', 'bubbles', Status.FULLY_QUALIFIED, '14.0', '\U0001fae7', 'Objects', 'household'),
    '\U0001faa5': EmojiRecord('\U0001faa5', 'toothbrush', Status.FULLY_QUALIFIED, '13.0', '\U0001faa5', 'Objects', 'household'),
    '\U0001f9fd': EmojiRecord('\U0001f9fd', 'sponge', Status.FULLY_QUALIFIED, '11.0', '\U0001f9fd', 'Objects', 'household'),
    '\U0001f9ef': EmojiRecord('\U0001f9ef', 'fire extinguisher', Status.FULLY_QUALIFIED, '11.0', '\U0001f9ef', 'Objects', 'household'),
    '\U0001f6d2': EmojiRecord('\U0001f6d2', 'shopping cart', Status.FULLY_QUALIFIED, '3.0', '\U0001f6d2', 'Objects', 'household'),
    '\U0001f6ac': EmojiRecord('\U0001f6ac', 'cigarette', Status.FULLY_QUALIFIED, '0.6', '\U0001f6ac', 'Objects', 'other-object'),
    '\u26b0\ufe0f': EmojiRecord('\u26b0\ufe0f', 'coffin', Status.FULLY_QUALIFIED, '1.0', '\u26b0\ufe0f', 'Objects', 'other-object'),
    '\u26b0': EmojiRecord('\u26b0', 'coffin', Status.UNQUALIFIED, '1.0', '\u26b0\ufe0f', 'Objects', 'other-object'),
    '\U0001faa6': EmojiRecord('\U0001faa6', 'headstone', Status.FULLY_QUALIFIED, '13.0', '\U0001faa6', 'Objects', 'other-object'),
    '\u26b1\ufe0f': EmojiRecord('\u26b1\ufe0f', 'funeral urn', Status.FULLY_QUALIFIED, '1.0', '\u26b1\ufe0f', 'Objects', 'other-object'),
    '\u26b1': EmojiRecord('\u26b1', 'funeral urn', Status.UNQUALIFIED, '1.0', '\u26b1\ufe0f', 'Objects', 'other-object'),
    '\U0001f9ff': EmojiRecord('\U0001f9ff', 'nazar amulet', Status.FULLY_QUALIFIED, '11.0', '\U0001f9ff', 'Objects', 'other-object'),
    '\U0001faac': EmojiRecord('\U0001faac', 'hamsa', Status.FULLY_QUALIFIED, '14.0', '\U0001faac', 'Objects', 'other-object'),
    '\U0001f5ff': EmojiRecord('\U0001f5ff', 'moai', Status.FULLY_QUALIFIED, '0.6', '\U0001f5ff', 'Objects', 'other-object'),
    '\U0001faa7': EmojiRecord('\U0001faa7', 'placard', Status.FULLY_QUALIFIED, '13.0', '\U0001faa7', 'Objects', 'other-object'),
    '\U0001faaa': EmojiRecord('\U0001faaa', 'identification card', Status.FULLY_QUALIFIED, '14.0', '\U0001faaa', 'Objects', 'other-object'),
    '\U0001f3e7': EmojiRecord('\U0001f3e7', 'ATM sign', Status.FULLY_QUALIFIED, '0.6', '\U0001f3e7', 'Symbols', 'transport-sign'),
    '\U0001f6ae': EmojiRecord('\U0001f6ae', 'litter in bin sign', Status.FULLY_QUALIFIED, '1.0', '\U0001f6ae', 'Symbols', 'transport-sign'),
    '\U0001f6b0': EmojiRecord('\U0001f6b0', 'potable water', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b0', 'Symbols', 'transport-sign'),
    '\u267f': EmojiRecord('\u267f', 'wheelchair symbol', Status.FULLY_QUALIFIED, '0.6', '\u267f', 'Symbols', 'transport-sign'),
    '\U0001f6b9': EmojiRecord('\U0001f6b9', 'men\u2019s room', Status.FULLY_QUALIFIED, '0.6', '\U0001f6b9', 'Symbols', 'transport-sign'),
    '\U0001f6ba': EmojiRecord('\U0001f6ba', 'women\u2019s room', Status.FULLY_QUALIFIED, '0.6', '\U0001f6ba', 'Symbols', 'transport-sign'),
    '\U0001f6bb': EmojiRecord('\U0001f6bb', 'restroom', Status.FULLY_QUALIFIED, '0.6', '\U0001f6bb', 'Symbols', 'transport-sign'),
    '\U0001f6bc': EmojiRecord('\U0001f6bc', 'baby symbol', Status.FULLY_QUALIFIED, '0.6', '\U0001f6bc', 'Symbols', 'transport-sign'),
    '\U0001f6be': EmojiRecord('\U0001f6be', 'water closet', Status.FULLY_QUALIFIED, '0.6', '\U0001f6be', 'Symbols', 'transport-sign'),
    '\U0001f6c2': EmojiRecord('\U0001f6c2', 'passport control', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c2', 'Symbols', 'transport-sign'),
    '\U0001f6c3': EmojiRecord('\U0001f6c3', 'customs', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c3', 'Symbols', 'transport-sign'),
    '\U0001f6c4': EmojiRecord('\U0001f6c4', 'baggage claim', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c4', 'Symbols', 'transport-sign'),
    '\U0001f6c5': EmojiRecord('\U0001f6c5', 'left luggage', Status.FULLY_QUALIFIED, '1.0', '\U0001f6c5', 'Symbols', 'transport-sign'),
    '\u26a0\ufe0f': EmojiRecord('\u26a0\ufe0f', 'warning', Status.FULLY_QUALIFIED, '0.6', '\u26a0\ufe0f', 'Symbols', 'warning'),
    '\u26a0': EmojiRecord('\u26a0', 'warning', Status.UNQUALIFIED, '0.6', '\u26a0\ufe0f', 'Symbols', 'warning'),
    '\U0001f6b8': EmojiRecord('\U0001f6b8', 'children crossing', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b8', 'Symbols', 'warning'),
    '\u26d4': EmojiRecord('\u26d4', 'no entry', Status.FULLY_QUALIFIED, '0.6', '\u26d4', 'Symbols', 'warning'),
    '\U0001f6ab': EmojiRecord('\U0001f6ab', 'prohibited', Status.FULLY_QUALIFIED, '0.6', '\U0001f6ab', 'Symbols', 'warning'),
    '\U0001f6b3': EmojiRecord('\U0001f6b3', 'no bicycles', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b3', 'Symbols', 'warning'),
    '\U0001f6ad': EmojiRecord('\U0001f6ad', 'no smoking', Status.FULLY_QUALIFIED, '0.6', '\U0001f6ad', 'Symbols', 'warning'),
    '\U0001f6af': EmojiRecord('\U0001f6af', 'no littering', Status.FULLY_QUALIFIED, '1.0', '\U0001f6af', 'Symbols', 'warning'),
    '\U0001f6b1': EmojiRecord('\U0001f6b1', 'non-potable water', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b1', 'Symbols', 'warning'),
    '\U0001f6b7': EmojiRecord('\U0001f6b7', 'no pedestrians', Status.FULLY_QUALIFIED, '1.0', '\U0001f6b7', 'Symbols', 'warning'),
    '\U0001f4f5': EmojiRecord('\U0001f4f5', 'no mobile phones', Status.FULLY_QUALIFIED, '1.0', '\U0001f4f5', 'Symbols', 'warning'),
    '\U0001f51e': EmojiRecord('\U0001f51e', 'no one under eighteen', Status.FULLY_QUALIFIED, '0.6', '\U0001f51e', 'Symbols', 'warning'),
    '\u2622\ufe0f': EmojiRecord('\u2622\ufe0f', 'radioactive', Status.FULLY_QUALIFIED, '1.0', '\u2622\ufe0f', 'Symbols', 'warning'),
    '\u2622': EmojiRecord('\u2622', 'radioactive', Status.UNQUALIFIED, '1.0', '\u2622\ufe0f', 'Symbols', 'warning'),
    '\u2623\ufe0f': EmojiRecord('\u2623\ufe0f', 'biohazard', Status.FULLY_QUALIFIED, '1.0', '\u2623\ufe0f', 'Symbols', 'warning'),
    '\u2623': EmojiRecord('\u2623', 'biohazard', Status.UNQUALIFIED, '1.0', '\u2623\ufe0f', 'Symbols', 'warning'),
    '\u2b06\ufe0f': EmojiRecord('\u2b06\ufe0f', 'up arrow', Status.FULLY_QUALIFIED, '0.6', '\u2b06\ufe0f', 'Symbols', 'arrow'),
    '\u2b06': EmojiRecord('\u2b06', 'up arrow', Status.UNQUALIFIED, '0.6', '\u2b06\ufe0f', 'Symbols', 'arrow'),
    '\u2197\ufe0f': EmojiRecord('\u2197\ufe0f', 'up-right arrow', Status.FULLY_QUALIFIED, '0.6', '\u2197\ufe0f', 'Symbols', 'arrow'),
    '\u2197': EmojiRecord('\u2197', 'up-right arrow', Status.UNQUALIFIED, '0.6', '\u2197\ufe0f', 'Symbols', 'arrow'),
    '\u27a1\ufe0f': EmojiRecord('\u27a1\ufe0f', 'right arrow', Status.FULLY_QUALIFIED, '0.6', '\u27a1\ufe0f', 'Symbols', 'arrow'),
    '\u27a1': EmojiRecord('\u27a1', 'right arrow', Status.UNQUALIFIED, '0.6', '\u27a1\ufe0f', 'Symbols', 'arrow'),
    '\u2198\ufe0f': EmojiRecord('\u2198\ufe0f', 'down-right arrow', Status.FULLY_QUALIFIED, '0.6', '\u2198\ufe0f', 'Symbols', 'arrow'),
    '\u2198': EmojiRecord('\u2198', 'down-right arrow', Status.UNQUALIFIED, '0.6', '\u2198\ufe0f', 'Symbols', 'arrow'),
    '\u2b07\ufe0f': EmojiRecord('\u2b07\ufe0f', 'down arrow', Status.FULLY_QUALIFIED, '0.6', '\u2b07\ufe0f', 'Symbols', 'arrow'),
    '\u2b07': EmojiRecord('\u2b07', 'down arrow', Status.UNQUALIFIED, '0.6', '\u2b07\ufe0f', 'Symbols', 'arrow'),
    '\u2199\ufe0f': EmojiRecord('\u2199\ufe0f', 'down-left arrow', Status.FULLY_QUALIFIED, '0.6', '\u2199\ufe0f', 'Symbols', 'arrow'),
    '\u2199': EmojiRecord('\u2199', 'down-left arrow', Status.UNQUALIFIED, '0.6', '\u2199\ufe0f', 'Symbols', 'arrow'),
    '\u2b05\ufe0f': EmojiRecord('\u2b05\ufe0f', 'left arrow', Status.FULLY_QUALIFIED, '0.6', '\u2b05\ufe0f', 'Symbols', 'arrow'),
    '\u2b05': EmojiRecord('\u2b05', 'left arrow', Status.UNQUALIFIED, '0.6', '\u2b05\ufe0f', 'Symbols', 'arrow'),
    '\u2196\ufe0f': EmojiRecord('\u2196\ufe0f', 'up-left arrow', Status.FULLY_QUALIFIED, '0.6', '\u2196\ufe0f', 'Symbols', 'arrow'),
    '\u2196': EmojiRecord('\u2196', 'up-left arrow', Status.UNQUALIFIED, '0.6', '\u2196\ufe0f', 'Symbols', 'arrow'),
    '\u2195\ufe0f': EmojiRecord('\u2195\ufe0f', 'up-down arrow', Status.FULLY_QUALIFIED, '0.6', '\u2195\ufe0f', 'Symbols', 'arrow'),
    '\u2195': EmojiRecord('\u2195', 'up-down arrow', Status.UNQUALIFIED, '0.6', '\u2195\ufe0f', 'Symbols', 'arrow'),
    '\u2194\ufe0f': EmojiRecord('\u2194\ufe0f', 'left-right arrow', Status.FULLY_QUALIFIED, '0.6', '\u2194\ufe0f', 'Symbols', 'arrow'),
    '\u2194': EmojiRecord('\u2194', 'left-right arrow', Status.UNQUALIFIED, '0.6', '\u2194\ufe0f', 'Symbols', 'arrow'),
    '\u21a9\ufe0f': EmojiRecord('\u21a9\ufe0f', 'right arrow curving left', Status.FULLY_QUALIFIED, '0.6', '\u21a9\ufe0f', 'Symbols', 'arrow'),
    '\u21a9': EmojiRecord('\u21a9', 'right arrow curving left', Status.UNQUALIFIED, '0.6', '\u21a9\ufe0f', 'Symbols', 'arrow'),
    '\u21aa\ufe0f': EmojiRecord('\u21aa\ufe0f', 'left arrow curving right', Status.FULLY_QUALIFIED, '0.6', '\u21aa\ufe0f', 'Symbols', 'arrow'),
    '\u21aa': EmojiRecord('\u21aa', 'left arrow curving right', Status.UNQUALIFIED, '0.6', '\u21aa\ufe0f', 'Symbols', 'arrow'),
    '\u2934\ufe0f': EmojiRecord('\u2934\ufe0f', 'right arrow curving up', Status.FULLY_QUALIFIED, '0.6', '\u2934\ufe0f', 'Symbols', 'arrow'),
    '\u2934': EmojiRecord('\u2934', 'right arrow curving up', Status.UNQUALIFIED, '0.6', '\u2934\ufe0f', 'Symbols', 'arrow'),
    '\u2935\ufe0f': EmojiRecord('\u2935\ufe0f', 'right arrow curving down', Status.FULLY_QUALIFIED, '0.6', '\u2935\ufe0f', 'Symbols', 'arrow'),
    '\u2935': EmojiRecord('\u2935', 'right arrow curving down', Status.UNQUALIFIED, '0.6', '\u2935\ufe0f', 'Symbols', 'arrow'),
    '\U0001f503': EmojiRecord('\U0001f503', 'clockwise vertical arrows', Status.FULLY_QUALIFIED, '0.6', '\U0001f503', 'Symbols', 'arrow'),
    '\U0001f504': EmojiRecord('\U0001f504', 'counterclockwise arrows button', Status.FULLY_QUALIFIED, '1.0', '\U0001f504', 'Symbols', 'arrow'),
    '\U0001f519': EmojiRecord('\U0001f519', 'BACK arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f519', 'Symbols', 'arrow'),
    '\U0001f51a': EmojiRecord('\U0001f51a', 'END arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f51a', 'Symbols', 'arrow'),
    '\U0001f51b': EmojiRecord('\U0001f51b', 'ON! arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f51b', 'Symbols', 'arrow'),
    '\U0001f51c': EmojiRecord('\U0001f51c', 'SOON arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f51c', 'Symbols', 'arrow'),
    '\U0001f51d': EmojiRecord('\U0001f51d', 'TOP arrow', Status.FULLY_QUALIFIED, '0.6', '\U0001f51d', 'Symbols', 'arrow'),
    '\U0001f6d0': EmojiRecord('\U0001f6d0', 'place of worship', Status.FULLY_QUALIFIED, '1.0', '\U0001f6d0', 'Symbols', 'religion'),
    '\u269b\ufe0f': EmojiRecord('\u269b\ufe0f', 'atom symbol', Status.FULLY_QUALIFIED, '1.0', '\u269b\ufe0f', 'Symbols', 'religion'),
    '\u269b': EmojiRecord('\u269b', 'atom symbol', Status.UNQUALIFIED, '1.0', '\u269b\ufe0f', 'Symbols', 'religion'),
    '\U0001f549\ufe0f': EmojiRecord('\U0001f549\ufe0f', 'om', Status.FULLY_QUALIFIED, '0.7', '\U0001f549\ufe0f', 'Symbols', 'religion'),
    '\U0001f549': EmojiRecord('\U0001f549', 'om', Status.UNQUALIFIED, '0.7', '\U0001f549\ufe0f', 'Symbols', 'religion'),
    '\u2721\ufe0f': EmojiRecord('\u2721\ufe0f', 'star of David', Status.FULLY_QUALIFIED, '0.7', '\u2721\ufe0f', 'Symbols', 'religion'),
    '\u2721': EmojiRecord('\u2721', 'star of David', Status.UNQUALIFIED, '0.7', '\u2721\ufe0f', 'Symbols', 'religion'),
    '\u2638\ufe0f': EmojiRecord('\u2638\ufe0f', 'wheel of dharma', Status.FULLY_QUALIFIED, '0.7', '\u2638\ufe0f', 'Symbols', 'religion'),
    '\u2638': EmojiRecord('\u2638', 'wheel of dharma', Status.UNQUALIFIED, '0.7', '\u2638\ufe0f', 'Symbols', 'religion'),
    '\u262f\ufe0f': EmojiRecord('\u262f\ufe0f', 'yin yang', Status.FULLY_QUALIFIED, '0.7', '\u262f\ufe0f', 'Symbols', 'religion'),
    '\u262f': EmojiRecord('\u262f', 'yin yang', Status.UNQUALIFIED, '0.7', '\u262f\ufe0f', 'Symbols', 'religion'),
    '\u271d\ufe0f': EmojiRecord('\u271d\ufe0f', 'latin cross', Status.FULLY_QUALIFIED, '0.7', '\u271d\ufe0f', 'Symbols', 'religion'),
    '\u271d': EmojiRecord('\u271d', 'latin cross', Status.UNQUALIFIED, '0.7', '\u271d\ufe0f', 'Symbols', 'religion'),
    '\u2626\ufe0f': EmojiRecord('\u2626\ufe0f', 'orthodox cross', Status.FULLY_QUALIFIED, '1.0', '\u2626\ufe0f', 'Symbols', 'religion'),
    '\u2626': EmojiRecord('\u2626', 'orthodox cross', Status.UNQUALIFIED, '1.0', '\u2626\ufe0f', 'Symbols', 'religion'),
    '\u262a\ufe0f': EmojiRecord('\u262a\ufe0f', 'star and crescent', Status.FULLY_QUALIFIED, '0.7', '\u262a\ufe0f', 'Symbols', 'religion'),
    '\u262a': EmojiRecord('\u262a', 'star and crescent', Status.UNQUALIFIED, '0.7', '\u262a\ufe0f', 'Symbols', 'religion'),
    '\u262e\ufe0f': EmojiRecord('\u262e\ufe0f', 'peace symbol', Status.FULLY_QUALIFIED, '1.0', '\u262e\ufe0f', 'Symbols', 'religion'),
    '\u262e': EmojiRecord('\u262e', 'peace symbol', Status.UNQUALIFIED, '1.0', '\u262e\ufe0f', 'Symbols', 'religion'),
    '\U0001f54e': EmojiRecord('\U0001f54e', 'menorah', Status.FULLY_QUALIFIED, '1.0', '\U0001f54e', 'Symbols', 'religion'),
    '\U0001f52f': EmojiRecord('\U0001f52f', 'dotted six-pointed star', Status.FULLY_QUALIFIED, '0.6', '\U0001f52f', 'Symbols', 'religion'),
    '\U0001faaf': EmojiRecord('\U0001faaf', 'khanda', Status.FULLY_QUALIFIED, '15.0', '\U0001faaf', 'Symbols', 'religion'),
    '\u2648': EmojiRecord('\u2648', 'Aries', Status.FULLY_QUALIFIED, '0.6', '\u2648', 'Symbols', 'zodiac'),
    '\u2649': EmojiRecord('\u2649', 'Taurus', Status.FULLY_QUALIFIED, '0.6', '\u2649', 'Symbols', 'zodiac'),
    '\u264a': EmojiRecord('\u264a', 'Gemini', Status.FULLY_QUALIFIED, '0.6', '\u264a', 'Symbols', 'zodiac'),
    '\u264b': EmojiRecord('\u264b', 'Cancer', Status.FULLY_QUALIFIED, '0.6', '\u264b', 'Symbols', 'zodiac'),
    '\u264c': EmojiRecord('\u264c', 'Leo', Status.FULLY_QUALIFIED, '0.6', '\u264c', 'Symbols', 'zodiac'),
    '\u264d': EmojiRecord('\u264d', 'Virgo', Status.FULLY_QUALIFIED, '0.6', '\u264d', 'Symbols', 'zodiac'),
    '\u264e': EmojiRecord('\u264e', 'Libra', Status.FULLY_QUALIFIED, '0.6', '\u264e', 'Symbols', 'zodiac'),
    '\u264f': EmojiRecord('\u264f', 'Scorpio', Status.FULLY_QUALIFIED, '0.6', '\u264f', 'Symbols', 'zodiac'),
    '\u2650': EmojiRecord('\u2650', 'Sagittarius', Status.FULLY_QUALIFIED, '0.6', '\u2650', 'Symbols', 'zodiac'),
    '\u2651': EmojiRecord('\u2651', 'Capricorn', Status.FULLY_QUALIFIED, '0.6', '\u2651', 'Symbols', 'zodiac'),
    '\u2652': EmojiRecord('\u2652', 'Aquarius', Status.FULLY_QUALIFIED, '0.6', '\u2652', 'Symbols', 'zodiac'),
    '\u2653': EmojiRecord('\u2653', 'Pisces', Status.FULLY_QUALIFIED, '0.6', '\u2653', 'Symbols', 'zodiac'),
    '\u26ce': EmojiRecord('\u26ce', 'Ophiuchus', Status.FULLY_QUALIFIED, '0.6', '\u26ce', 'Symbols', 'zodiac'),
    '\U0001f500': EmojiRecord('\U0001f500', 'shuffle tracks button', Status.FULLY_QUALIFIED, '1.0', '\U0001f500', 'Symbols', 'av-symbol'),
    '\U0001f501': EmojiRecord('\U0001f501', 'repeat button', Status.FULLY_QUALIFIED, '1.0', '\U0001f501', 'Symbols', 'av-symbol'),
    '\U0001f502': EmojiRecord('\U0001f502', 'repeat single button', Status.FULLY_QUALIFIED, '1.0', '\U0001f502', 'Symbols', 'av-symbol'),
    '\u25b6\ufe0f': EmojiRecord('\u25b6\ufe0f', 'play button', Status.FULLY_QUALIFIED, '0.6', '\u25b6\ufe0f', 'Symbols', 'av-symbol'),
    '\u25b6': EmojiRecord('\u25b6', 'play button', Status.UNQUALIFIED, '0.6', '\u25b6\ufe0f', 'Symbols', 'av-symbol'),
    '\u23e9': EmojiRecord('\u23e9', 'fast-forward button', Status.FULLY_QUALIFIED, '0.6', '\u23e9', 'Symbols', 'av-symbol'),
    '\u23ed\ufe0f': EmojiRecord('\u23ed\ufe0f', 'next track button', Status.FULLY_QUALIFIED, '0.7', '\u23ed\ufe0f', 'Symbols', 'av-symbol'),
    '\u23ed': EmojiRecord('\u23ed', 'next track button', Status.UNQUALIFIED, '0.7', '\u23ed\ufe0f', 'Symbols', 'av-symbol'),
    '\u23ef\ufe0f': EmojiRecord('\u23ef\ufe0f', 'play or pause button', Status.FULLY_QUALIFIED, '1.0', '\u23ef\ufe0f', 'Symbols', 'av-symbol'),
    '\u23ef': EmojiRecord('\u23ef', 'play or pause button', Status.UNQUALIFIED, '1.0', '\u23ef\ufe0f', 'Symbols', 'av-symbol'),
    '\u25c0\ufe0f': EmojiRecord('\u25c0\ufe0f', 'reverse button', Status.FULLY_QUALIFIED, '0.6', '\u25c0\ufe0f', 'Symbols', 'av-symbol'),
    '\u25c0': EmojiRecord('\u25c0', 'reverse button', Status.UNQUALIFIED, '0.6', '\u25c0\ufe0f', 'Symbols', 'av-symbol'),
    '\u23ea': EmojiRecord('\u23ea', 'fast reverse button', Status.FULLY_QUALIFIED, '0.6', '\u23ea', 'Symbols', 'av-symbol'),
    '\u23ee\ufe0f': EmojiRecord('\u23ee\ufe0f', 'last track button', Status.FULLY_QUALIFIED, '0.7', '\u23ee\ufe0f', 'Symbols', 'av-symbol'),
    '\u23ee': EmojiRecord('\u23ee', 'last track button', Status.UNQUALIFIED, '0.7', '\u23ee\ufe0f', 'Symbols', 'av-symbol'),
    '\U0001f53c': EmojiRecord('\U0001f53c', 'upwards button', Status.FULLY_QUALIFIED, '0.6', '\U0001f53c', 'Symbols', 'av-symbol'),
    '\u23eb': EmojiRecord('\u23eb', 'fast up button', Status.FULLY_QUALIFIED, '0.6', '\u23eb', 'Symbols', 'av-symbol'),
    '\U0001f53d': EmojiRecord('\U0001f53d', 'downwards button', Status.FULLY_QUALIFIED, '0.6', '\U0001f53d', 'Symbols', 'av-symbol'),
    '\u23ec': EmojiRecord('\u23ec', 'fast down button', Status.FULLY_QUALIFIED, '0.6', '\u23ec', 'Symbols', 'av-symbol'),
    '\u23f8\ufe0f': EmojiRecord('\u23f8\ufe0f', 'pause button', Status.FULLY_QUALIFIED, '0.7', '\u23f8\ufe0f', 'Symbols', 'av-symbol'),
    '\u23f8': EmojiRecord('\u23f8', 'pause button', Status.UNQUALIFIED, '0.7', '\u23f8\ufe0f', 'Symbols', 'av-symbol'),
    '\u23f9\ufe0f': EmojiRecord('\u23f9\ufe0f', 'stop button', Status.FULLY_QUALIFIED, '0.7', '\u23f9\ufe0f', 'Symbols', 'av-symbol'),
    '\u23f9': EmojiRecord('\u23f9', 'stop button', Status.UNQUALIFIED, '0.7', '\u23f9\ufe0f', 'Symbols', 'av-symbol'),
    '\u23fa\ufe0f': EmojiRecord('\u23fa\ufe0f', 'record button', Status.FULLY_QUALIFIED, '0.7', '\u23fa\ufe0f', 'Symbols', 'av-symbol'),
    '\u23fa': EmojiRecord('\u23fa', 'record button', Status.UNQUALIFIED, '0.7', '\u23fa\ufe0f', 'Symbols', 'av-symbol'),
    '\u23cf\ufe0f': EmojiRecord('\u23cf\ufe0f', 'eject button', Status.FULLY_QUALIFIED, '1.0', '\u23cf\ufe0f', 'Symbols', 'av-symbol'),
    '\u23cf': EmojiRecord('\u23cf', 'eject button', Status.UNQUALIFIED, '1.0', '\u23cf\ufe0f', 'Symbols', 'av-symbol'),
    '\U0001f3a6': EmojiRecord('\U0001f3a6', 'cinema', Status.FULLY_QUALIFIED, '0.6', '\U0001f3a6', 'Symbols', 'av-symbol'),
    '\U0001f505': EmojiRecord('\U0001f505', 'dim button', Status.FULLY_QUALIFIED, '1.0', '\U0001f505', 'Symbols', 'av-symbol'),
    '\U0001f506': EmojiRecord('\U0001f506', 'bright button', Status.FULLY_QUALIFIED, '1.0', '\U0001f506', 'Symbols', 'av-symbol'),
    '\U0001f4f6': EmojiRecord('\U0001f4f6', 'antenna bars', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f6', 'Symbols', 'av-symbol'),
    '\U0001f6dc': EmojiRecord('\U0001f6dc', 'wireless', Status.FULLY_QUALIFIED, '15.0', '\U0001f6dc', 'Symbols', 'av-symbol'),
    '\U0001f4f3': EmojiRecord('\U0001f4f3', 'vibration mode', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f3', 'Symbols', 'av-symbol'),
    '\U0001f4f4': EmojiRecord('\U0001f4f4', 'mobile phone off', Status.FULLY_QUALIFIED, '0.6', '\U0001f4f4', 'Symbols', 'av-symbol'),
    '\u2640\ufe0f': EmojiRecord('\u2640\ufe0f', 'female sign', Status.FULLY_QUALIFIED, '4.0', '\u2640\ufe0f', 'Symbols', 'gender'),
    '\u2640': EmojiRecord('\u2640', 'female sign', Status.UNQUALIFIED, '4.0', '\u2640\ufe0f', 'Symbols', 'gender'),
    '\u2642\ufe0f': EmojiRecord('\u2642\ufe0f', 'male sign', Status.FULLY_QUALIFIED, '4.0', '\u2642\ufe0f', 'Symbols', 'gender'),
    '\u2642': EmojiRecord('\u2642', 'male sign', Status.UNQUALIFIED, '4.0', '\u2642\ufe0f', 'Symbols', 'gender'),
    '\u26a7\ufe0f': EmojiRecord('\u26a7\ufe0f', 'transgender symbol', Status.FULLY_QUALIFIED, '13.0', '\u26a7\ufe0f', 'Symbols', 'gender'),
    '\u26a7': EmojiRecord('\u26a7', 'transgender symbol', Status.UNQUALIFIED, '13.0', '\u26a7\ufe0f', 'Symbols', 'gender'),
    '\u2716\ufe0f': EmojiRecord('\u2716\ufe0f', 'multiply', Status.FULLY_QUALIFIED, '0.6', '\u2716\ufe0f', 'Symbols', 'math'),
    '\u2716': EmojiRecord('\u2716', 'multiply', Status.UNQUALIFIED, '0.6', '\u2716\ufe0f', 'Symbols', 'math'),
    '\u2795': EmojiRecord('\u2795', 'plus', Status.FULLY_QUALIFIED, '0.6', '\u2795', 'Symbols', 'math'),
    '\u2796': EmojiRecord('\u2796', 'minus', Status.FULLY_QUALIFIED, '0.6', '\u2796', 'Symbols', 'math'),
    '\u2797': EmojiRecord('\u2797', 'divide', Status.FULLY_QUALIFIED, '0.6', '\u2797', 'Symbols', 'math'),
    '\U0001f7f0': EmojiRecord('\U0001f7f0', 'heavy equals sign', Status.FULLY_QUALIFIED, '14.0', '\U0001f7f0', 'Symbols', 'math'),
    '\u267e\ufe0f': EmojiRecord('\u267e\ufe0f', 'infinity', Status.FULLY_QUALIFIED, '11.0', '\u267e\ufe0f', 'Symbols', 'math'),
    '\u267e': EmojiRecord('\u267e', 'infinity', Status.UNQUALIFIED, '11.0', '\u267e\ufe0f', 'Symbols', 'math'),
    '\u203c\ufe0f': EmojiRecord('\u203c\ufe0f', 'double exclamation mark', Status.FULLY_QUALIFIED, '0.6', '\u203c\ufe0f', 'Symbols', 'punctuation'),
    '\u203c': EmojiRecord('\u203c', 'double exclamation mark', Status.UNQUALIFIED, '0.6', '\u203c\ufe0f', 'Symbols', 'punctuation'),
    '\u2049\ufe0f': EmojiRecord('\u2049\ufe0f', 'exclamation question mark', Status.FULLY_QUALIFIED, '0.6', '\u2049\ufe0f', 'Symbols', 'punctuation'),
    '\u2049': EmojiRecord('\u2049', 'exclamation question mark', Status.UNQUALIFIED, '0.6', '\u2049\ufe0f', 'Symbols', 'punctuation'),
    '\u2753': EmojiRecord('\u2753', 'red question mark', Status.FULLY_QUALIFIED, '0.6', '\u2753', 'Symbols', 'punctuation'),
    '\u2754': EmojiRecord('\u2754', 'white question mark', Status.FULLY_QUALIFIED, '0.6', '\u2754', 'Symbols', 'punctuation'),
    '\u2755': EmojiRecord('\u2755', 'white exclamation mark', Status.FULLY_QUALIFIED, '0.6', '\u2755', 'Symbols', 'punctuation'),
    '\u2757': EmojiRecord('\u2757', 'red exclamation mark', Status.FULLY_QUALIFIED, '0.6', '\u2757', 'Symbols', 'punctuation'),
    '\u3030\ufe0f': EmojiRecord('\u3030\ufe0f', 'wavy dash', Status.FULLY_QUALIFIED, '0.6', '\u3030\ufe0f', 'Symbols', 'punctuation'),
    '\u3030': EmojiRecord('\u3030', 'wavy dash', Status.UNQUALIFIED, '0.6', '\u3030\ufe0f', 'Symbols', 'punctuation'),
    '\U0001f4b1': EmojiRecord('\U0001f4b1', 'currency exchange', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b1', 'Symbols', 'currency'),
    '\U0001f4b2': EmojiRecord('\U0001f4b2', 'heavy dollar sign', Status.FULLY_QUALIFIED, '0.6', '\U0001f4b2', 'Symbols', 'currency'),
    '\u2695\ufe0f': EmojiRecord('\u2695\ufe0f', 'medical symbol', Status.FULLY_QUALIFIED, '4.0', '\u2695\ufe0f', 'Symbols', 'other-symbol'),
    '\u2695': EmojiRecord('\u2695', 'medical symbol', Status.UNQUALIFIED, '4.0', '\u2695\ufe0f', 'Symbols', 'other-symbol'),
    '\u267b\ufe0f': EmojiRecord('\u267b\ufe0f', 'recycling symbol', Status.FULLY_QUALIFIED, '0.6', '\u267b\ufe0f', 'Symbols', 'other-symbol'),
    '\u267b': EmojiRecord('\u267b', 'recycling symbol', Status.UNQUALIFIED, '0.6', '\u267b\ufe0f', 'Symbols', 'other-symbol'),
    '\u269c\ufe0f': EmojiRecord('\u269c\ufe0f', 'fleur-de-lis', Status.FULLY_QUALIFIED, '1.0', '\u269c\ufe0f', 'Symbols', 'other-symbol'),
    '\u269c': EmojiRecord('\u269c', 'fleur-de-lis', Status.UNQUALIFIED, '1.0', '\u269c\ufe0f', 'Symbols', 'other-symbol'),
    '\U0001f531': EmojiRecord('\U0001f531', 'trident emblem', Status.FULLY_QUALIFIED, '0.6', '\U0001f531', 'Symbols', 'other-symbol'),
    '\U0001f4db': EmojiRecord('\U0001f4db', 'name badge', Status.FULLY_QUALIFIED, '0.6', '\U0001f4db', 'Symbols', 'other-symbol'),
    '\U0001f530': EmojiRecord('\U0001f530', 'Japanese symbol for beginner', Status.FULLY_QUALIFIED, '0.6', '\U0001f530', 'Symbols', 'other-symbol'),
    '\u2b55': EmojiRecord('\u2b55', 'hollow red circle', Status.FULLY_QUALIFIED, '0.6', '\u2b55', 'Symbols', 'other-symbol'),
    '\u2705': EmojiRecord('\u2705', 'check mark button', Status.FULLY_QUALIFIED, '0.6', '\u2705', 'Symbols', 'other-symbol'),
    '\u2611\ufe0f': EmojiRecord('\u2611\ufe0f', 'check box with check', Status.FULLY_QUALIFIED, '0.6', '\u2611\ufe0f', 'Symbols', 'other-symbol'),
    '\u2611': EmojiRecord('\u2611', 'check box with check', Status.UNQUALIFIED, '0.6', '\u2611\ufe0f', 'Symbols', 'other-symbol'),
    '\u2714\ufe0f': EmojiRecord('\u2714\ufe0f', 'check mark', Status.FULLY_QUALIFIED, '0.6', '\u2714\ufe0f', 'Symbols', 'other-symbol'),
    '\u2714': EmojiRecord('\u2714', 'check mark', Status.UNQUALIFIED, '0.6', '\u2714\ufe0f', 'Symbols', 'other-symbol'),
    '\u274c': EmojiRecord('\u274c', 'cross mark', Status.FULLY_QUALIFIED, '0.6', '\u274c', 'Symbols', 'other-symbol'),
    '\u274e': EmojiRecord('\u274e', 'cross mark button', Status.FULLY_QUALIFIED, '0.6', '\u274e', 'Symbols', 'other-symbol'),
    '\u27b0': EmojiRecord('\u27b0', 'curly loop', Status.FULLY_QUALIFIED, '0.6', '\u27b0', 'Symbols', 'other-symbol'),
    '\u27bf': EmojiRecord('\u27bf', 'double curly loop', Status.FULLY_QUALIFIED, '1.0', '\u27bf', 'Symbols', 'other-symbol'),
    '\u303d\ufe0f': EmojiRecord('\u303d\ufe0f', 'part alternation mark', Status.FULLY_QUALIFIED, '0.6', '\u303d\ufe0f', 'Symbols', 'other-symbol'),
    '\u303d': EmojiRecord('\u303d', 'part alternation mark', Status.UNQUALIFIED, '0.6', '\u303d\ufe0f', 'Symbols', 'other-symbol'),
    '\u2733\ufe0f': EmojiRecord('\u2733\ufe0f', 'eight-spoked asterisk', Status.FULLY_QUALIFIED, '0.6', '\u2733\ufe0f', 'Symbols', 'other-symbol'),
    '\u2733': EmojiRecord('\u2733', 'eight-spoked asterisk', Status.UNQUALIFIED, '0.6', '\u2733\ufe0f', 'Symbols', 'other-symbol'),
    '\u2734\ufe0f': EmojiRecord('\u2734\ufe0f', 'eight-pointed star', Status.FULLY_QUALIFIED, '0.6', '\u2734\ufe0f', 'Symbols', 'other-symbol'),
    '\u2734': EmojiRecord('\u2734', 'eight-pointed star', Status.UNQUALIFIED, '0.6', '\u2734\ufe0f', 'Symbols', 'other-symbol'),
    '\u2747\ufe0f': EmojiRecord('\u2747\ufe0f', 'sparkle', Status.FULLY_QUALIFIED, '0.6', '\u2747\ufe0f', 'Symbols', 'other-symbol'),
    '\u2747': EmojiRecord('\u2747', 'sparkle', Status.UNQUALIFIED, '0.6', '\u2747\ufe0f', 'Symbols', 'other-symbol'),
    '\xa9\ufe0f': EmojiRecord('\xa9\ufe0f', 'copyright', Status.FULLY_QUALIFIED, '0.6', '\xa9\ufe0f', 'Symbols', 'other-symbol'),
    '\xa9': EmojiRecord('\xa9', 'copyright', Status.UNQUALIFIED, '0.6', '\xa9\ufe0f', 'Symbols', 'other-symbol'),
    '\xae\ufe0f': EmojiRecord('\xae\ufe0f', 'registered', Status.FULLY_QUALIFIED, '0.6', '\xae\ufe0f', 'Symbols', 'other-symbol'),
    '\xae': EmojiRecord('\xae', 'registered', Status.UNQUALIFIED, '0.6', '\xae\ufe0f', 'Symbols', 'other-symbol'),
    '\u2122\ufe0f': EmojiRecord('\u2122\ufe0f', 'trade mark', Status.FULLY_QUALIFIED, '0.6', '\u2122\ufe0f', 'Symbols', 'other-symbol'),
    '\u2122': EmojiRecord('\u2122', 'trade mark', Status.UNQUALIFIED, '0.6', '\u2122\ufe0f', 'Symbols', 'other-symbol'),
    '#\ufe0f\u20e3': EmojiRecord('#\ufe0f\u20e3', 'keycap: #', Status.FULLY_QUALIFIED, '0.6', '#\ufe0f\u20e3', 'Symbols', 'keycap'),
    '#\u20e3': EmojiRecord('#\u20e3', 'keycap: #', Status.UNQUALIFIED, '0.6', '#\ufe0f\u20e3', 'Symbols', 'keycap'),
    '*\ufe0f\u20e3': EmojiRecord('*\ufe0f\u20e3', 'keycap: *', Status.FULLY_QUALIFIED, '2.0', '*\ufe0f\u20e3', 'Symbols', 'keycap'),
    '*\u20e3': EmojiRecord('*\u20e3', 'keycap: *', Status.UNQUALIFIED, '2.0', '*\ufe0f\u20e3', 'Symbols', 'keycap'),
    '0\ufe0f\u20e3': EmojiRecord('0\ufe0f\u20e3', 'keycap: 0', Status.FULLY_QUALIFIED, '0.6', '0\ufe0f\u20e3', 'Symbols', 'keycap'),
    '0\u20e3': EmojiRecord('0\u20e3', 'keycap: 0', Status.UNQUALIFIED, '0.6', '0\ufe0f\u20e3', 'Symbols', 'keycap'),
    '1\ufe0f\u20e3': EmojiRecord('1\ufe0f\u20e3', 'keycap: 1', Status.FULLY_QUALIFIED, '0.6', '1\ufe0f\u20e3', 'Symbols', 'keycap'),
    '1\u20e3': EmojiRecord('1\u20e3', 'keycap: 1', Status.UNQUALIFIED, '0.6', '1\ufe0f\u20e3', 'Symbols', 'keycap'),
    '2\ufe0f\u20e3': EmojiRecord('2\ufe0f\u20e3', 'keycap: 2', Status.FULLY_QUALIFIED, '0.6', '2\ufe0f\u20e3', 'Symbols', 'keycap'),
    '2\u20e3': EmojiRecord('2\u20e3', 'keycap: 2', Status.UNQUALIFIED, '0.6', '2\ufe0f\u20e3', 'Symbols', 'keycap'),
    '3\ufe0f\u20e3': EmojiRecord('3\ufe0f\u20e3', 'keycap: 3', Status.FULLY_QUALIFIED, '0.6', '3\ufe0f\u20e3', 'Symbols', 'keycap'),
    '3\u20e3': EmojiRecord('3\u20e3', 'keycap: 3', Status.UNQUALIFIED, '0.6', '3\ufe0f\u20e3', 'Symbols', 'keycap'),
    '4\ufe0f\u20e3': EmojiRecord('4\ufe0f\u20e3', 'keycap: 4', Status.FULLY_QUALIFIED, '0.6', '4\ufe0f\u20e3', 'Symbols', 'keycap'),
    '4\u20e3': EmojiRecord('4\u20e3', 'keycap: 4', Status.UNQUALIFIED, '0.6', '4\ufe0f\u20e3', 'Symbols', 'keycap'),
    '5\ufe0f\u20e3': EmojiRecord('5\ufe0f\u20e3', 'keycap: 5', Status.FULLY_QUALIFIED, '0.6', '5\ufe0f\u20e3', 'Symbols', 'keycap'),
    '5\u20e3': EmojiRecord('5\u20e3', 'keycap: 5', Status.UNQUALIFIED, '0.6', '5\ufe0f\u20e3', 'Symbols', 'keycap'),
    '6\ufe0f\u20e3': EmojiRecord('6\ufe0f\u20e3', 'keycap: 6', Status.FULLY_QUALIFIED, '0.6', '6\ufe0f\u20e3', 'Symbols', 'keycap'),
    '6\u20e3': EmojiRecord('6\u20e3', 'keycap: 6', Status.UNQUALIFIED, '0.6', '6\ufe0f\u20e3', 'Symbols', 'keycap'),
    '7\ufe0f\u20e3': EmojiRecord('7\ufe0f\u20e3', 'keycap: 7', Status.FULLY_QUALIFIED, '0.6', '7\ufe0f\u20e3', 'Symbols', 'keycap'),
    '7\u20e3': EmojiRecord('7\u20e3', 'keycap: 7', Status.UNQUALIFIED, '0.6', '7\ufe0f\u20e3', 'Symbols', 'keycap'),
    '8\ufe0f\u20e3': EmojiRecord('8\ufe0f\u20e3', 'keycap: 8', Status.FULLY_QUALIFIED, '0.6', '8\ufe0f\u20e3', 'Symbols', 'keycap'),
    '8\u20e3': EmojiRecord('8\u20e3', 'keycap: 8', Status.UNQUALIFIED, '0.6', '8\ufe0f\u20e3', 'Symbols', 'keycap'),
    '9\ufe0f\u20e3': EmojiRecord('9\ufe0f\u20e3', 'keycap: 9', Status.FULLY_QUALIFIED, '0.6', '9\ufe0f\u20e3', 'Symbols', 'keycap'),
    '9\u20e3': EmojiRecord('9\u20e3', 'keycap: 9', Status.UNQUALIFIED, '0.6', '9\ufe0f\u20e3', 'Symbols', 'keycap'),
    '\U0001f51f': EmojiRecord('\U0001f51f', 'keycap: 10', Status.FULLY_QUALIFIED, '0.6', '\U0001f51f', 'Symbols', 'keycap'),
    '\U0001f520': EmojiRecord('\U0001f520', 'input latin uppercase', Status.FULLY_QUALIFIED, '0.6', '\U0001f520', 'Symbols', 'alphanum'),
    '\U0001f521': EmojiRecord('\U0001f521', 'input latin lowercase', Status.FULLY_QUALIFIED, '0.6', '\U0001f521', 'Symbols', 'alphanum'),
    '\U0001f522': EmojiRecord('\U0001f522', 'input numbers', Status.FULLY_QUALIFIED, '0.6', '\U0001f522', 'Symbols', 'alphanum'),
    '\U0001f523': EmojiRecord('\U0001f523', 'input symbols', Status.FULLY_QUALIFIED, '0.6', '\U0001f523', 'Symbols', 'alphanum'),
    '\U0001f524': EmojiRecord('\U0001f524', 'input latin letters', Status.FULLY_QUALIFIED, '0.6', '\U0001f524', 'Symbols', 'alphanum'),
    '\U0001f170\ufe0f': EmojiRecord('\U0001f170\ufe0f', 'A button (blood type)', Status.FULLY_QUALIFIED, '0.6', '\U0001f170\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f170': EmojiRecord('\U0001f170', 'A button (blood type)', Status.UNQUALIFIED, '0.6', '\U0001f170\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f18e': EmojiRecord('\U0001f18e', 'AB button (blood type)', Status.FULLY_QUALIFIED, '0.6', '\U0001f18e', 'Symbols', 'alphanum'),
    '\U0001f171\ufe0f': EmojiRecord('\U0001f171\ufe0f', 'B button (blood type)', Status.FULLY_QUALIFIED, '0.6', '\U0001f171\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f171': EmojiRecord('\U0001f171', 'B button (blood type)', Status.UNQUALIFIED, '0.6', '\U0001f171\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f191': EmojiRecord('\U0001f191', 'CL button', Status.FULLY_QUALIFIED, '0.6', '\U0001f191', 'Symbols', 'alphanum'),
    '\U0001f192': EmojiRecord('\U0001f192', 'COOL button', Status.FULLY_QUALIFIED, '0.6', '\U0001f192', 'Symbols', 'alphanum'),
    '\U0001f193': EmojiRecord('\U0001f193', 'FREE button', Status.FULLY_QUALIFIED, '0.6', '\U0001f193', 'Symbols', 'alphanum'),
    '\u2139\ufe0f': EmojiRecord('\u2139\ufe0f', 'information', Status.FULLY_QUALIFIED, '0.6', '\u2139\ufe0f', 'Symbols', 'alphanum'),
    '\u2139': EmojiRecord('\u2139', 'information', Status.UNQUALIFIED, '0.6', '\u2139\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f194': EmojiRecord('\U0001f194', 'ID button', Status.FULLY_QUALIFIED, '0.6', '\U0001f194', 'Symbols', 'alphanum'),
    '\u24c2\ufe0f': EmojiRecord('\u24c2\ufe0f', 'circled M', Status.FULLY_QUALIFIED, '0.6', '\u24c2\ufe0f', 'Symbols', 'alphanum'),
    '\u24c2': EmojiRecord('\u24c2', 'circled M', Status.UNQUALIFIED, '0.6', '\u24c2\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f195': EmojiRecord('\U0001f195', 'NEW button', Status.FULLY_QUALIFIED, '0.6', '\U0001f195', 'Symbols', 'alphanum'),
    '\U0001f196': EmojiRecord('\U0001f196', 'NG button', Status.FULLY_QUALIFIED, '0.6', '\U0001f196', 'Symbols', 'alphanum'),
    '\U0001f17e\ufe0f': EmojiRecord('\U0001f17e\ufe0f', 'O button (blood type)', Status.FULLY_QUALIFIED, '0.6', '\U0001f17e\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f17e': EmojiRecord('\U0001f17e', 'O button (blood type)', Status.UNQUALIFIED, '0.6', '\U0001f17e\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f197': EmojiRecord('\U0001f197', 'OK button', Status.FULLY_QUALIFIED, '0.6', '\U0001f197', 'Symbols', 'alphanum'),
    '\U0001f17f\ufe0f': EmojiRecord('\U0001f17f\ufe0f', 'P button', Status.FULLY_QUALIFIED, '0.6', '\U0001f17f\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f17f': EmojiRecord('\U0001f17f', 'P button', Status.UNQUALIFIED, '0.6', '\U0001f17f\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f198': EmojiRecord('\U0001f198', 'SOS button', Status.FULLY_QUALIFIED, '0.6', '\U0001f198', 'Symbols', 'alphanum'),
    '\U0001f199': EmojiRecord('\U0001f199', 'UP! button', Status.FULLY_QUALIFIED, '0.6', '\U0001f199', 'Symbols', 'alphanum'),
    '\U0001f19a': EmojiRecord('\U0001f19a', 'VS button', Status.FULLY_QUALIFIED, '0.6', '\U0001f19a', 'Symbols', 'alphanum'),
    '\U0001f201': EmojiRecord('\U0001f201', 'Japanese \u201chere\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f201', 'Symbols', 'alphanum'),
    '\U0001f202\ufe0f': EmojiRecord('\U0001f202\ufe0f', 'Japanese \u201cservice charge\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f202\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f202': EmojiRecord('\U0001f202', 'Japanese \u201cservice charge\u201d button', Status.UNQUALIFIED, '0.6', '\U0001f202\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f237\ufe0f': EmojiRecord('\U0001f237\ufe0f', 'Japanese \u201cmonthly amount\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f237\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f237': EmojiRecord('\U0001f237', 'Japanese \u201cmonthly amount\u201d button', Status.UNQUALIFIED, '0.6', '\U0001f237\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f236': EmojiRecord('\U0001f236', 'Japanese \u201cnot free of charge\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f236', 'Symbols', 'alphanum'),
    '\U0001f22f': EmojiRecord('\U0001f22f', 'Japanese \u201creserved\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f22f', 'Symbols', 'alphanum'),
    '\U0001f250': EmojiRecord('\U0001f250', 'Japanese \u201cbargain\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f250', 'Symbols', 'alphanum'),
    '\U0001f239': EmojiRecord('\U0001f239', 'Japanese \u201cdiscount\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f239', 'Symbols', 'alphanum'),
    '\U0001f21a': EmojiRecord('\U0001f21a', 'Japanese \u201cfree of charge\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f21a', 'Symbols', 'alphanum'),
    '\U0001f232': EmojiRecord('\U0001f232', 'Japanese \u201cprohibited\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f232', 'Symbols', 'alphanum'),
    '\U0001f251': EmojiRecord('\U0001f251', 'Japanese \u201cacceptable\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f251', 'Symbols', 'alphanum'),
    '\U0001f238': EmojiRecord('\U0001f238', 'Japanese \u201capplication\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f238', 'Symbols', 'alphanum'),
    '\U0001f234': EmojiRecord('\U0001f234', 'Japanese \u201cpassing grade\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f234', 'Symbols', 'alphanum'),
    '\U0001f233': EmojiRecord('\U0001f233', 'Japanese \u201cvacancy\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f233', 'Symbols', 'alphanum'),
    '\u3297\ufe0f': EmojiRecord('\u3297\ufe0f', 'Japanese \u201ccongratulations\u201d button', Status.FULLY_QUALIFIED, '0.6', '\u3297\ufe0f', 'Symbols', 'alphanum'),
    '\u3297': EmojiRecord('\u3297', 'Japanese \u201ccongratulations\u201d button', Status.UNQUALIFIED, '0.6', '\u3297\ufe0f', 'Symbols', 'alphanum'),
    '\u3299\ufe0f': EmojiRecord('\u3299\ufe0f', 'Japanese \u201csecret\u201d button', Status.FULLY_QUALIFIED, '0.6', '\u3299\ufe0f', 'Symbols', 'alphanum'),
    '\u3299': EmojiRecord('\u3299', 'Japanese \u201csecret\u201d button', Status.UNQUALIFIED, '0.6', '\u3299\ufe0f', 'Symbols', 'alphanum'),
    '\U0001f23a': EmojiRecord('\U0001f23a', 'Japanese \u201copen for business\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f23a', 'Symbols', 'alphanum'),
    '\U0001f235': EmojiRecord('\U0001f235', 'Japanese \u201cno vacancy\u201d button', Status.FULLY_QUALIFIED, '0.6', '\U0001f235', 'Symbols', 'alphanum'),
    '\U0001f534': EmojiRecord('\U0001f534', 'red circle', Status.FULLY_QUALIFIED, '0.6', '\U0001f534', 'Symbols', 'geometric'),
    '\U0001f7e0': EmojiRecord('\U0001f7e0', 'orange circle', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e0', 'Symbols', 'geometric'),
    '\U0001f7e1': EmojiRecord('\U0001f7e1', 'yellow circle', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e1', 'Symbols', 'geometric'),
    '\U0001f7e2': EmojiRecord('\U0001f7e2', 'green circle', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e2', 'Symbols', 'geometric'),
    '\U0001f535': EmojiRecord('\U0001f535', 'blue circle', Status.FULLY_QUALIFIED, '0.6', '\U0001f535', 'Symbols', 'geometric'),
    '\U0001f7e3': EmojiRecord('\U0001f7e3', 'purple circle', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e3', 'Symbols', 'geometric'),
    '\U0001f7e4': EmojiRecord('\U0001f7e4', 'brown circle', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e4', 'Symbols', 'geometric'),
    '\u26ab': EmojiRecord('\u26ab', 'black circle', Status.FULLY_QUALIFIED, '0.6', '\u26ab', 'Symbols', 'geometric'),
    '\u26aa': EmojiRecord('\u26aa', 'white circle', Status.FULLY_QUALIFIED, '0.6', '\u26aa', 'Symbols', 'geometric'),
    '\U0001f7e5': EmojiRecord('\U0001f7e5', 'red square', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e5', 'Symbols', 'geometric'),
    '\U0001f7e7': EmojiRecord('\U0001f7e7', 'orange square', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e7', 'Symbols', 'geometric'),
    '\U0001f7e8': EmojiRecord('\U0001f7e8', 'yellow square', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e8', 'Symbols', 'geometric'),
    '\U0001f7e9': EmojiRecord('\U0001f7e9', 'green square', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e9', 'Symbols', 'geometric'),
    '\U0001f7e6': EmojiRecord('\U0001f7e6', 'blue square', Status.FULLY_QUALIFIED, '12.0', '\U0001f7e6', 'Symbols', 'geometric'),
    '\U0001f7ea': EmojiRecord('\U0001f7ea', 'purple square', Status.FULLY_QUALIFIED, '12.0', '\U0001f7ea', 'Symbols', 'geometric'),
    '\U0001f7eb': EmojiRecord('\U0001f7eb', 'brown square', Status.FULLY_QUALIFIED, '12.0', '\U0001f7eb', 'Symbols', 'geometric'),
    '\u2b1b': EmojiRecord('\u2b1b', 'black large square', Status.FULLY_QUALIFIED, '0.6', '\u2b1b', 'Symbols', 'geometric'),
    '\u2b1c': EmojiRecord('\u2b1c', 'white large square', Status.FULLY_QUALIFIED, '0.6', '\u2b1c', 'Symbols', 'geometric'),
    '\u25fc\ufe0f': EmojiRecord('\u25fc\ufe0f', 'black medium square', Status.FULLY_QUALIFIED, '0.6', '\u25fc\ufe0f', 'Symbols', 'geometric'),
    '\u25fc': EmojiRecord('\u25fc', 'black medium square', Status.UNQUALIFIED, '0.6', '\u25fc\ufe0f', 'Symbols', 'geometric'),
    '\u25fb\ufe0f': EmojiRecord('\u25fb\ufe0f', 'white medium square', Status.FULLY_QUALIFIED, '0.6', '\u25fb\ufe0f', 'Symbols', 'geometric'),
    '\u25fb': EmojiRecord('\u25fb', 'white medium square', Status.UNQUALIFIED, '0.6', '\u25fb\ufe0f', 'Symbols', 'geometric'),
    '\u25fe': EmojiRecord('\u25fe', 'black medium-small square', Status.FULLY_QUALIFIED, '0.6', '\u25fe', 'Symbols', 'geometric'),
    '\u25fd': EmojiRecord('\u25fd', 'white medium-small square', Status.FULLY_QUALIFIED, '0.6', '\u25fd', 'Symbols', 'geometric'),
    '\u25aa\ufe0f': EmojiRecord('\u25aa\ufe0f', 'black small square', Status.FULLY_QUALIFIED, '0.6', '\u25aa\ufe0f', 'Symbols', 'geometric'),
    '\u25aa': EmojiRecord('\u25aa', 'black small square', Status.UNQUALIFIED, '0.6', '\u25aa\ufe0f', 'Symbols', 'geometric'),
    '\u25ab\ufe0f': EmojiRecord('\u25ab\ufe0f', 'white small square', Status.FULLY_QUALIFIED, '0.6', '\u25ab\ufe0f', 'Symbols', 'geometric'),
    '\u25ab': EmojiRecord('\u25ab', 'white small square', Status.UNQUALIFIED, '0.6', '\u25ab\ufe0f', 'Symbols', 'geometric'),
    '\U0001f536': EmojiRecord('\U0001f536', 'large orange diamond', Status.FULLY_QUALIFIED, '0.6', '\U0001f536', 'Symbols', 'geometric'),
    '\U0001f537': EmojiRecord('\U0001f537', 'large blue diamond', Status.FULLY_QUALIFIED, '0.6', '\U0001f537', 'Symbols', 'geometric'),
    '\U0001f538': EmojiRecord('\U0001f538', 'small orange diamond', Status.FULLY_QUALIFIED, '0.6', '\U0001f538', 'Symbols', 'geometric'),
    '\U0001f539': EmojiRecord('\U0001f539', 'small blue diamond', Status.FULLY_QUALIFIED, '0.6', '\U0001f539', 'Symbols', 'geometric'),
    '\U0001f53a': EmojiRecord('\U0001f53a', 'red triangle pointed up', Status.FULLY_QUALIFIED, '0.6', '\U0001f53a', 'Symbols', 'geometric'),
    '\U0001f53b': EmojiRecord('\U0001f53b', 'red triangle pointed down', Status.FULLY_QUALIFIED, '0.6', '\U0001f53b', 'Symbols', 'geometric'),
    '\U0001f4a0': EmojiRecord('\U0001f4a0', 'diamond with a dot', Status.FULLY_QUALIFIED, '0.6', '\U0001f4a0', 'Symbols', 'geometric'),
    '\U0001f518': EmojiRecord('\U0001f518', 'radio button', Status.FULLY_QUALIFIED, '0.6', '\U0001f518', 'Symbols', 'geometric'),
    '\U0001f533': EmojiRecord('\U0001f533', 'white square button', Status.FULLY_QUALIFIED, '0.6', '\U0001f533', 'Symbols', 'geometric'),
    '\U0001f532': EmojiRecord('\U0001f532', 'black square button', Status.FULLY_QUALIFIED, '0.6', '\U0001f532', 'Symbols', 'geometric'),
    '\U0001f3c1': EmojiRecord('\U0001f3c1', 'chequered flag', Status.FULLY_QUALIFIED, '0.6', '\U0001f3c1', 'Flags', 'flag'),
    '\U0001f6a9': EmojiRecord('\U0001f6a9', 'triangular flag', Status.FULLY_QUALIFIED, '0.6', '\U0001f6a9', 'Flags', 'flag'),
    '\U0001f38c': EmojiRecord('\U0001f38c', 'crossed flags', Status.FULLY_QUALIFIED, '0.6', '\U0001f38c', 'Flags', 'flag'),
    '\U0001f3f4': EmojiRecord('\U0001f3f4', 'black flag', Status.FULLY_QUALIFIED, '1.0', '\U0001f3f4', 'Flags', 'flag'),
    '\U0001f3f3\ufe0f': EmojiRecord('\U0001f3f3\ufe0f', 'white flag', Status.FULLY_QUALIFIED, '0.7', '\U0001f3f3\ufe0f', 'Flags', 'flag'),
    '\U0001f3f3': EmojiRecord('\U0001f3f3', 'white flag', Status.UNQUALIFIED, '0.7', '\U0001f3f3\ufe0f', 'Flags', 'flag'),
    '\U0001f3f3\ufe0f\u200d\U0001f308': EmojiRecord('\U0001f3f3\ufe0f\u200d\U0001f308', 'rainbow flag', Status.FULLY_QUALIFIED, '4.0', '\U0001f3f3\ufe0f\u200d\U0001f308', 'Flags', 'flag'),
    '\U0001f3f3\u200d\U0001f308': EmojiRecord('\U0001f3f3\u200d\U0001f308', 'rainbow flag', Status.UNQUALIFIED, '4.0', '\U0001f3f3\ufe0f\u200d\U0001f308', 'Flags', 'flag'),
    '\U0001f3f3\ufe0f\u200d\u26a7\ufe0f': EmojiRecord('\U0001f3f3\ufe0f\u200d\u26a7\ufe0f', 'transgender flag', Status.FULLY_QUALIFIED, '13.0', '\U0001f3f3\ufe0f\u200d\u26a7\ufe0f', 'Flags', 'flag'),
    '\U0001f3f3\u200d\u26a7\ufe0f': EmojiRecord('\U0001f3f3\u200d\u26a7\ufe0f', 'transgender flag', Status.UNQUALIFIED, '13.0', '\U0001f3f3\ufe0f\u200d\u26a7\ufe0f', 'Flags', 'flag'),
    '\U0001f3f3\ufe0f\u200d\u26a7': EmojiRecord('\U0001f3f3\ufe0f\u200d\u26a7', 'transgender flag', Status.MINIMALLY_QUALIFIED, '13.0', '\U0001f3f3\ufe0f\u200d\u26a7\ufe0f', 'Flags', 'flag'),
    '\U0001f3f3\u200d\u26a7': EmojiRecord('\U0001f3f3\u200d\u26a7', 'transgender flag', Status.UNQUALIFIED, '13.0', '\U0001f3f3\ufe0f\u200d\u26a7\ufe0f', 'Flags', 'flag'),
    '\U0001f3f4\u200d\u2620\ufe0f': EmojiRecord('\U0001f3f4\u200d\u2620\ufe0f', 'pirate flag', Status.FULLY_QUALIFIED, '11.0', '\U0001f3f4\u200d\u2620\ufe0f', 'Flags', 'flag'),
    '\U0001f3f4\u200d\u2620': EmojiRecord('\U0001f3f4\u200d\u2620', 'pirate flag', Status.MINIMALLY_QUALIFIED, '11.0', '\U0001f3f4\u200d\u2620\ufe0f', 'Flags', 'flag'),
    '\U0001f1e6\U0001f1e8': EmojiRecord('\U0001f1e6\U0001f1e8', 'flag: Ascension Island', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1e9': EmojiRecord('\U0001f1e6\U0001f1e9', 'flag: Andorra', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1ea': EmojiRecord('\U0001f1e6\U0001f1ea', 'flag: United Arab Emirates', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1eb': EmojiRecord('\U0001f1e6\U0001f1eb', 'flag: Afghanistan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1ec': EmojiRecord('\U0001f1e6\U0001f1ec', 'flag: Antigua & Barbuda', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1ee': EmojiRecord('\U0001f1e6\U0001f1ee', 'flag: Anguilla', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1f1': EmojiRecord('\U0001f1e6\U0001f1f1', 'flag: Albania', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1f2': EmojiRecord('\U0001f1e6\U0001f1f2', 'flag: Armenia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1f4': EmojiRecord('\U0001f1e6\U0001f1f4', 'flag: Angola', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1f6': EmojiRecord('\U0001f1e6\U0001f1f6', 'flag: Antarctica', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1f6', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1f7': EmojiRecord('\U0001f1e6\U0001f1f7', 'flag: Argentina', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1f8': EmojiRecord('\U0001f1e6\U0001f1f8', 'flag: American Samoa', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1f9': EmojiRecord('\U0001f1e6\U0001f1f9', 'flag: Austria', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1fa': EmojiRecord('\U0001f1e6\U0001f1fa', 'flag: Australia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1fc': EmojiRecord('\U0001f1e6\U0001f1fc', 'flag: Aruba', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1fd': EmojiRecord('\U0001f1e6\U0001f1fd', 'flag: \xc5land Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1fd', 'Flags', 'country-flag'),
    '\U0001f1e6\U0001f1ff': EmojiRecord('\U0001f1e6\U0001f1ff', 'flag: Azerbaijan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e6\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1e6': EmojiRecord('\U0001f1e7\U0001f1e6', 'flag: Bosnia & Herzegovina', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1e7': EmojiRecord('\U0001f1e7\U0001f1e7', 'flag: Barbados', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1e7', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1e9': EmojiRecord('\U0001f1e7\U0001f1e9', 'flag: Bangladesh', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1ea': EmojiRecord('\U0001f1e7\U0001f1ea', 'flag: Belgium', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1eb': EmojiRecord('\U0001f1e7\U0001f1eb', 'flag: Burkina Faso', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1ec': EmojiRecord('\U0001f1e7\U0001f1ec', 'flag: Bulgaria', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1ed': EmojiRecord('\U0001f1e7\U0001f1ed', 'flag: Bahrain', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1ee': EmojiRecord('\U0001f1e7\U0001f1ee', 'flag: Burundi', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1ef': EmojiRecord('\U0001f1e7\U0001f1ef', 'flag: Benin', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1ef', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f1': EmojiRecord('\U0001f1e7\U0001f1f1', 'flag: St. Barth\xe9lemy', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f2': EmojiRecord('\U0001f1e7\U0001f1f2', 'flag: Bermuda', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f3': EmojiRecord('\U0001f1e7\U0001f1f3', 'flag: Brunei', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f4': EmojiRecord('\U0001f1e7\U0001f1f4', 'flag: Bolivia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f6': EmojiRecord('\U0001f1e7\U0001f1f6', 'flag: Caribbean Netherlands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f6', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f7': EmojiRecord('\U0001f1e7\U0001f1f7', 'flag: Brazil', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f8': EmojiRecord('\U0001f1e7\U0001f1f8', 'flag: Bahamas', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1f9': EmojiRecord('\U0001f1e7\U0001f1f9', 'flag: Bhutan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1fb': EmojiRecord('\U0001f1e7\U0001f1fb', 'flag: Bouvet Island', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1fb', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1fc': EmojiRecord('\U0001f1e7\U0001f1fc', 'flag: Botswana', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1fe': EmojiRecord('\U0001f1e7\U0001f1fe', 'flag: Belarus', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1e7\U0001f1ff': EmojiRecord('\U0001f1e7\U0001f1ff', 'flag: Belize', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e7\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1e6': EmojiRecord('\U0001f1e8\U0001f1e6', 'flag: Canada', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1e8': EmojiRecord('\U0001f1e8\U0001f1e8', 'flag: Cocos (Keeling) Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1e9': EmojiRecord('\U0001f1e8\U0001f1e9', 'flag: Congo - Kinshasa', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1eb': EmojiRecord('\U0001f1e8\U0001f1eb', 'flag: Central African Republic', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1ec': EmojiRecord('\U0001f1e8\U0001f1ec', 'flag: Congo - Brazzaville', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1ed': EmojiRecord('\U0001f1e8\U0001f1ed', 'flag: Switzerland', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1ee': EmojiRecord('\U0001f1e8\U0001f1ee', 'flag: C\xf4te d\u2019Ivoire', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1f0': EmojiRecord('\U0001f1e8\U0001f1f0', 'flag: Cook Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1f1': EmojiRecord('\U0001f1e8\U0001f1f1', 'flag: Chile', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1f2': EmojiRecord('\U0001f1e8\U0001f1f2', 'flag: Cameroon', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1f3': EmojiRecord('\U0001f1e8\U0001f1f3', 'flag: China', Status.FULLY_QUALIFIED, '0.6', '\U0001f1e8\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1f4': EmojiRecord('\U0001f1e8\U0001f1f4', 'flag: Colombia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1f5': EmojiRecord('\U0001f1e8\U0001f1f5', 'flag: Clipperton Island', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1f5', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1f7': EmojiRecord('\U0001f1e8\U0001f1f7', 'flag: Costa Rica', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1fa': EmojiRecord('\U0001f1e8\U0001f1fa', 'flag: Cuba', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1fb': EmojiRecord('\U0001f1e8\U0001f1fb', 'flag: Cape Verde', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1fb', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1fc': EmojiRecord('\U0001f1e8\U0001f1fc', 'flag: Cura\xe7ao', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1fd': EmojiRecord('\U0001f1e8\U0001f1fd', 'flag: Christmas Island', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1fd', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1fe': EmojiRecord('\U0001f1e8\U0001f1fe', 'flag: Cyprus', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1e8\U0001f1ff': EmojiRecord('\U0001f1e8\U0001f1ff', 'flag: Czechia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e8\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1e9\U0001f1ea': EmojiRecord('\U0001f1e9\U0001f1ea', 'flag: Germany', Status.FULLY_QUALIFIED, '0.6', '\U0001f1e9\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1e9\U0001f1ec': EmojiRecord('\U0001f1e9\U0001f1ec', 'flag: Diego Garcia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e9\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1e9\U0001f1ef': EmojiRecord('\U0001f1e9\U0001f1ef', 'flag: Djibouti', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e9\U0001f1ef', 'Flags', 'country-flag'),
    '\U0001f1e9\U0001f1f0': EmojiRecord('\U0001f1e9\U0001f1f0', 'flag: Denmark', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e9\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1e9\U0001f1f2': EmojiRecord('\U0001f1e9\U0001f1f2', 'flag: Dominica', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e9\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1e9\U0001f1f4': EmojiRecord('\U0001f1e9\U0001f1f4', 'flag: Dominican Republic', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e9\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1e9\U0001f1ff': EmojiRecord('\U0001f1e9\U0001f1ff', 'flag: Algeria', Status.FULLY_QUALIFIED, '2.0', '\U0001f1e9\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1e6': EmojiRecord('\U0001f1ea\U0001f1e6', 'flag: Ceuta & Melilla', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1e8': EmojiRecord('\U0001f1ea\U0001f1e8', 'flag: Ecuador', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1ea': EmojiRecord('\U0001f1ea\U0001f1ea', 'flag: Estonia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1ec': EmojiRecord('\U0001f1ea\U0001f1ec', 'flag: Egypt', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1ed': EmojiRecord('\U0001f1ea\U0001f1ed', 'flag: Western Sahara', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1f7': EmojiRecord('\U0001f1ea\U0001f1f7', 'flag: Eritrea', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1f8': EmojiRecord('\U0001f1ea\U0001f1f8', 'flag: Spain', Status.FULLY_QUALIFIED, '0.6', '\U0001f1ea\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1f9': EmojiRecord('\U0001f1ea\U0001f1f9', 'flag: Ethiopia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1ea\U0001f1fa': EmojiRecord('\U0001f1ea\U0001f1fa', 'flag: European Union', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ea\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1eb\U0001f1ee': EmojiRecord('\U0001f1eb\U0001f1ee', 'flag: Finland', Status.FULLY_QUALIFIED, '2.0', '\U0001f1eb\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1eb\U0001f1ef': EmojiRecord('\U0001f1eb\U0001f1ef', 'flag: Fiji', Status.FULLY_QUALIFIED, '2.0', '\U0001f1eb\U0001f1ef', 'Flags', 'country-flag'),
    '\U0001f1eb\U0001f1f0': EmojiRecord('\U0001f1eb\U0001f1f0', 'flag: Falkland Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1eb\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1eb\U0001f1f2': EmojiRecord('\U0001f1eb\U0001f1f2', 'flag: Micronesia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1eb\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1eb\U0001f1f4': EmojiRecord('\U0001f1eb\U0001f1f4', 'flag: Faroe Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1eb\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1eb\U0001f1f7': EmojiRecord('\U0001f1eb\U0001f1f7', 'flag: France', Status.FULLY_QUALIFIED, '0.6', '\U0001f1eb\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1e6': EmojiRecord('\U0001f1ec\U0001f1e6', 'flag: Gabon', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1e7': EmojiRecord('\U0001f1ec\U0001f1e7', 'flag: United Kingdom', Status.FULLY_QUALIFIED, '0.6', '\U0001f1ec\U0001f1e7', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1e9': EmojiRecord('\U0001f1ec\U0001f1e9', 'flag: Grenada', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1ea': EmojiRecord('\U0001f1ec\U0001f1ea', 'flag: Georgia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1eb': EmojiRecord('\U0001f1ec\U0001f1eb', 'flag: French Guiana', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1ec': EmojiRecord('\U0001f1ec\U0001f1ec', 'flag: Guernsey', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1ed': EmojiRecord('\U0001f1ec\U0001f1ed', 'flag: Ghana', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1ee': EmojiRecord('\U0001f1ec\U0001f1ee', 'flag: Gibraltar', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f1': EmojiRecord('\U0001f1ec\U0001f1f1', 'flag: Greenland', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f2': EmojiRecord('\U0001f1ec\U0001f1f2', 'flag: Gambia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f3': EmojiRecord('\U0001f1ec\U0001f1f3', 'flag: Guinea', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f5': EmojiRecord('\U0001f1ec\U0001f1f5', 'flag: Guadeloupe', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f5', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f6': EmojiRecord('\U0001f1ec\U0001f1f6', 'flag: Equatorial Guinea', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f6', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f7': EmojiRecord('\U0001f1ec\U0001f1f7', 'flag: Greece', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f8': EmojiRecord('\U0001f1ec\U0001f1f8', 'flag: South Georgia & South Sandwich Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1f9': EmojiRecord('\U0001f1ec\U0001f1f9', 'flag: Guatemala', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1fa': EmojiRecord('\U0001f1ec\U0001f1fa', 'flag: Guam', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1fc': EmojiRecord('\U0001f1ec\U0001f1fc', 'flag: Guinea-Bissau', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1ec\U0001f1fe': EmojiRecord('\U0001f1ec\U0001f1fe', 'flag: Guyana', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ec\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1ed\U0001f1f0': EmojiRecord('\U0001f1ed\U0001f1f0', 'flag: Hong Kong SAR China', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ed\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1ed\U0001f1f2': EmojiRecord('\U0001f1ed\U0001f1f2', 'flag: Heard & McDonald Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ed\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1ed\U0001f1f3': EmojiRecord('\U0001f1ed\U0001f1f3', 'flag: Honduras', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ed\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1ed\U0001f1f7': EmojiRecord('\U0001f1ed\U0001f1f7', 'flag: Croatia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ed\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1ed\U0001f1f9': EmojiRecord('\U0001f1ed\U0001f1f9', 'flag: Haiti', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ed\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1ed\U0001f1fa': EmojiRecord('\U0001f1ed\U0001f1fa', 'flag: Hungary', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ed\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1e8': EmojiRecord('\U0001f1ee\U0001f1e8', 'flag: Canary Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1e9': EmojiRecord('\U0001f1ee\U0001f1e9', 'flag: Indonesia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1ea': EmojiRecord('\U0001f1ee\U0001f1ea', 'flag: Ireland', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f1': EmojiRecord('\U0001f1ee\U0001f1f1', 'flag: Israel', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f2': EmojiRecord('\U0001f1ee\U0001f1f2', 'flag: Isle of Man', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f3': EmojiRecord('\U0001f1ee\U0001f1f3', 'flag: India', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f4': EmojiRecord('\U0001f1ee\U0001f1f4', 'flag: British Indian Ocean Territory', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f6': EmojiRecord('\U0001f1ee\U0001f1f6', 'flag: Iraq', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1f6', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f7': EmojiRecord('\U0001f1ee\U0001f1f7', 'flag: Iran', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f8': EmojiRecord('\U0001f1ee\U0001f1f8', 'flag: Iceland', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ee\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1ee\U0001f1f9': EmojiRecord('\U0001f1ee\U0001f1f9', 'flag: Italy', Status.FULLY_QUALIFIED, '0.6', '\U0001f1ee\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1ef\U0001f1ea': EmojiRecord('\U0001f1ef\U0001f1ea', 'flag: Jersey', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ef\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1ef\U0001f1f2': EmojiRecord('\U0001f1ef\U0001f1f2', 'flag: Jamaica', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ef\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1ef\U0001f1f4': EmojiRecord('\U0001f1ef\U0001f1f4', 'flag: Jordan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ef\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1ef\U0001f1f5': EmojiRecord('\U0001f1ef\U0001f1f5', 'flag: Japan', Status.FULLY_QUALIFIED, '0.6', '\U0001f1ef\U0001f1f5', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1ea': EmojiRecord('\U0001f1f0\U0001f1ea', 'flag: Kenya', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1ec': EmojiRecord('\U0001f1f0\U0001f1ec', 'flag: Kyrgyzstan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1ed': EmojiRecord('\U0001f1f0\U0001f1ed', 'flag: Cambodia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1ee': EmojiRecord('\U0001f1f0\U0001f1ee', 'flag: Kiribati', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1f2': EmojiRecord('\U0001f1f0\U0001f1f2', 'flag: Comoros', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1f3': EmojiRecord('\U0001f1f0\U0001f1f3', 'flag: St. Kitts & Nevis', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1f5': EmojiRecord('\U0001f1f0\U0001f1f5', 'flag: North Korea', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1f5', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1f7': EmojiRecord('\U0001f1f0\U0001f1f7', 'flag: South Korea', Status.FULLY_QUALIFIED, '0.6', '\U0001f1f0\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1fc': EmojiRecord('\U0001f1f0\U0001f1fc', 'flag: Kuwait', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1fe': EmojiRecord('\U0001f1f0\U0001f1fe', 'flag: Cayman Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1f0\U0001f1ff': EmojiRecord('\U0001f1f0\U0001f1ff', 'flag: Kazakhstan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f0\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1e6': EmojiRecord('\U0001f1f1\U0001f1e6', 'flag: Laos', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1e7': EmojiRecord('\U0001f1f1\U0001f1e7', 'flag: Lebanon', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1e7', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1e8': EmojiRecord('\U0001f1f1\U0001f1e8', 'flag: St. Lucia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1ee': EmojiRecord('\U0001f1f1\U0001f1ee', 'flag: Liechtenstein', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1f0': EmojiRecord('\U0001f1f1\U0001f1f0', 'flag: Sri Lanka', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1f7': EmojiRecord('\U0001f1f1\U0001f1f7', 'flag: Liberia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1f8': EmojiRecord('\U0001f1f1\U0001f1f8', 'flag: Lesotho', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1f9': EmojiRecord('\U0001f1f1\U0001f1f9', 'flag: Lithuania', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1fa': EmojiRecord('\U0001f1f1\U0001f1fa', 'flag: Luxembourg', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1fb': EmojiRecord('\U0001f1f1\U0001f1fb', 'flag: Latvia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1fb', 'Flags', 'country-flag'),
    '\U0001f1f1\U0001f1fe': EmojiRecord('\U0001f1f1\U0001f1fe', 'flag: Libya', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f1\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1e6': EmojiRecord('\U0001f1f2\U0001f1e6', 'flag: Morocco', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1e8': EmojiRecord('\U0001f1f2\U0001f1e8', 'flag: Monaco', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1e9': EmojiRecord('\U0001f1f2\U0001f1e9', 'flag: Moldova', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1ea': EmojiRecord('\U0001f1f2\U0001f1ea', 'flag: Montenegro', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1eb': EmojiRecord('\U0001f1f2\U0001f1eb', 'flag: St. Martin', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1ec': EmojiRecord('\U0001f1f2\U0001f1ec', 'flag: Madagascar', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1ed': EmojiRecord('\U0001f1f2\U0001f1ed', 'flag: Marshall Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f0': EmojiRecord('\U0001f1f2\U0001f1f0', 'flag: North Macedonia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f1': EmojiRecord('\U0001f1f2\U0001f1f1', 'flag: Mali', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f2': EmojiRecord('\U0001f1f2\U0001f1f2', 'flag: Myanmar (Burma)', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f3': EmojiRecord('\U0001f1f2\U0001f1f3', 'flag: Mongolia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f4': EmojiRecord('\U0001f1f2\U0001f1f4', 'flag: Macao SAR China', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f5': EmojiRecord('\U0001f1f2\U0001f1f5', 'flag: Northern Mariana Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f5', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f6': EmojiRecord('\U0001f1f2\U0001f1f6', 'flag: Martinique', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f6', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f7': EmojiRecord('\U0001f1f2\U0001f1f7', 'flag: Mauritania', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f8': EmojiRecord('\U0001f1f2\U0001f1f8', 'flag: Montserrat', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1f9': EmojiRecord('\U0001f1f2\U0001f1f9', 'flag: Malta', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1fa': EmojiRecord('\U0001f1f2\U0001f1fa', 'flag: Mauritius', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1fb': EmojiRecord('\U0001f1f2\U0001f1fb', 'flag: Maldives', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1fb', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1fc': EmojiRecord('\U0001f1f2\U0001f1fc', 'flag: Malawi', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1fd': EmojiRecord('\U0001f1f2\U0001f1fd', 'flag: Mexico', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1fd', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1fe': EmojiRecord('\U0001f1f2\U0001f1fe', 'flag: Malaysia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1f2\U0001f1ff': EmojiRecord('\U0001f1f2\U0001f1ff', 'flag: Mozambique', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f2\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1e6': EmojiRecord('\U0001f1f3\U0001f1e6', 'flag: Namibia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1e8': EmojiRecord('\U0001f1f3\U0001f1e8', 'flag: New Caledonia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1ea': EmojiRecord('\U0001f1f3\U0001f1ea', 'flag: Niger', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1eb': EmojiRecord('\U0001f1f3\U0001f1eb', 'flag: Norfolk Island', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1ec': EmojiRecord('\U0001f1f3\U0001f1ec', 'flag: Nigeria', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1ee': EmojiRecord('\U0001f1f3\U0001f1ee', 'flag: Nicaragua', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1f1': EmojiRecord('\U0001f1f3\U0001f1f1', 'flag: Netherlands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1f4': EmojiRecord('\U0001f1f3\U0001f1f4', 'flag: Norway', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1f5': EmojiRecord('\U0001f1f3\U0001f1f5', 'flag: Nepal', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1f5', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1f7': EmojiRecord('\U0001f1f3\U0001f1f7', 'flag: Nauru', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1fa': EmojiRecord('\U0001f1f3\U0001f1fa', 'flag: Niue', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1f3\U0001f1ff': EmojiRecord('\U0001f1f3\U0001f1ff', 'flag: New Zealand', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f3\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1f4\U0001f1f2': EmojiRecord('\U0001f1f4\U0001f1f2', 'flag: Oman', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f4\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1e6': EmojiRecord('\U0001f1f5\U0001f1e6', 'flag: Panama', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1ea': EmojiRecord('\U0001f1f5\U0001f1ea', 'flag: Peru', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1eb': EmojiRecord('\U0001f1f5\U0001f1eb', 'flag: French Polynesia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1ec': EmojiRecord('\U0001f1f5\U0001f1ec', 'flag: Papua New Guinea', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1ed': EmojiRecord('\U0001f1f5\U0001f1ed', 'flag: Philippines', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1f0': EmojiRecord('\U0001f1f5\U0001f1f0', 'flag: Pakistan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1f1': EmojiRecord('\U0001f1f5\U0001f1f1', 'flag: Poland', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1f2': EmojiRecord('\U0001f1f5\U0001f1f2', 'flag: St. Pierre & Miquelon', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1f3': EmojiRecord('\U0001f1f5\U0001f1f3', 'flag: Pitcairn Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1f7': EmojiRecord('\U0001f1f5\U0001f1f7', 'flag: Puerto Rico', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1f8': EmojiRecord('\U0001f1f5\U0001f1f8', 'flag: Palestinian Territories', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1f9': EmojiRecord('\U0001f1f5\U0001f1f9', 'flag: Portugal', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1fc': EmojiRecord('\U0001f1f5\U0001f1fc', 'flag: Palau', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1f5\U0001f1fe': EmojiRecord('\U0001f1f5\U0001f1fe', 'flag: Paraguay', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f5\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1f6\U0001f1e6': EmojiRecord('\U0001f1f6\U0001f1e6', 'flag: Qatar', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f6\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1f7\U0001f1ea': EmojiRecord('\U0001f1f7\U0001f1ea', 'flag: R\xe9union', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f7\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1f7\U0001f1f4': EmojiRecord('\U0001f1f7\U0001f1f4', 'flag: Romania', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f7\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1f7\U0001f1f8': EmojiRecord('\U0001f1f7\U0001f1f8', 'flag: Serbia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f7\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1f7\U0001f1fa': EmojiRecord('\U0001f1f7\U0001f1fa', 'flag: Russia', Status.FULLY_QUALIFIED, '0.6', '\U0001f1f7\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1f7\U0001f1fc': EmojiRecord('\U0001f1f7\U0001f1fc', 'flag: Rwanda', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f7\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1e6': EmojiRecord('\U0001f1f8\U0001f1e6', 'flag: Saudi Arabia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1e7': EmojiRecord('\U0001f1f8\U0001f1e7', 'flag: Solomon Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1e7', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1e8': EmojiRecord('\U0001f1f8\U0001f1e8', 'flag: Seychelles', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1e9': EmojiRecord('\U0001f1f8\U0001f1e9', 'flag: Sudan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1ea': EmojiRecord('\U0001f1f8\U0001f1ea', 'flag: Sweden', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1ec': EmojiRecord('\U0001f1f8\U0001f1ec', 'flag: Singapore', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1ed': EmojiRecord('\U0001f1f8\U0001f1ed', 'flag: St. Helena', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1ee': EmojiRecord('\U0001f1f8\U0001f1ee', 'flag: Slovenia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1ef': EmojiRecord('\U0001f1f8\U0001f1ef', 'flag: Svalbard & Jan Mayen', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1ef', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f0': EmojiRecord('\U0001f1f8\U0001f1f0', 'flag: Slovakia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f1': EmojiRecord('\U0001f1f8\U0001f1f1', 'flag: Sierra Leone', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f2': EmojiRecord('\U0001f1f8\U0001f1f2', 'flag: San Marino', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f3': EmojiRecord('\U0001f1f8\U0001f1f3', 'flag: Senegal', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f4': EmojiRecord('\U0001f1f8\U0001f1f4', 'flag: Somalia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f7': EmojiRecord('\U0001f1f8\U0001f1f7', 'flag: Suriname', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f8': EmojiRecord('\U0001f1f8\U0001f1f8', 'flag: South Sudan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1f9': EmojiRecord('\U0001f1f8\U0001f1f9', 'flag: S\xe3o Tom\xe9 & Pr\xedncipe', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1fb': EmojiRecord('\U0001f1f8\U0001f1fb', 'flag: El Salvador', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1fb', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1fd': EmojiRecord('\U0001f1f8\U0001f1fd', 'flag: Sint Maarten', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1fd', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1fe': EmojiRecord('\U0001f1f8\U0001f1fe', 'flag: Syria', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1f8\U0001f1ff': EmojiRecord('\U0001f1f8\U0001f1ff', 'flag: Eswatini', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f8\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1e6': EmojiRecord('\U0001f1f9\U0001f1e6', 'flag: Tristan da Cunha', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1e8': EmojiRecord('\U0001f1f9\U0001f1e8', 'flag: Turks & Caicos Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1e9': EmojiRecord('\U0001f1f9\U0001f1e9', 'flag: Chad', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1e9', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1eb': EmojiRecord('\U0001f1f9\U0001f1eb', 'flag: French Southern Territories', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1ec': EmojiRecord('\U0001f1f9\U0001f1ec', 'flag: Togo', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1ed': EmojiRecord('\U0001f1f9\U0001f1ed', 'flag: Thailand', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1ed', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1ef': EmojiRecord('\U0001f1f9\U0001f1ef', 'flag: Tajikistan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1ef', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1f0': EmojiRecord('\U0001f1f9\U0001f1f0', 'flag: Tokelau', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1f1': EmojiRecord('\U0001f1f9\U0001f1f1', 'flag: Timor-Leste', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1f1', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1f2': EmojiRecord('\U0001f1f9\U0001f1f2', 'flag: Turkmenistan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1f3': EmojiRecord('\U0001f1f9\U0001f1f3', 'flag: Tunisia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1f4': EmojiRecord('\U0001f1f9\U0001f1f4', 'flag: Tonga', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1f4', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1f7': EmojiRecord('\U0001f1f9\U0001f1f7', 'flag: T\xfcrkiye', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1f7', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1f9': EmojiRecord('\U0001f1f9\U0001f1f9', 'flag: Trinidad & Tobago', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1fb': EmojiRecord('\U0001f1f9\U0001f1fb', 'flag: Tuvalu', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1fb', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1fc': EmojiRecord('\U0001f1f9\U0001f1fc', 'flag: Taiwan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f1f9\U0001f1ff': EmojiRecord('\U0001f1f9\U0001f1ff', 'flag: Tanzania', Status.FULLY_QUALIFIED, '2.0', '\U0001f1f9\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1fa\U0001f1e6': EmojiRecord('\U0001f1fa\U0001f1e6', 'flag: Ukraine', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fa\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1fa\U0001f1ec': EmojiRecord('\U0001f1fa\U0001f1ec', 'flag: Uganda', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fa\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1fa\U0001f1f2': EmojiRecord('\U0001f1fa\U0001f1f2', 'flag: U.S. Outlying Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fa\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1fa\U0001f1f3': EmojiRecord('\U0001f1fa\U0001f1f3', 'flag: United Nations', Status.FULLY_QUALIFIED, '4.0', '\U0001f1fa\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1fa\U0001f1f8': EmojiRecord('\U0001f1fa\U0001f1f8', 'flag: United States', Status.FULLY_QUALIFIED, '0.6', '\U0001f1fa\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1fa\U0001f1fe': EmojiRecord('\U0001f1fa\U0001f1fe', 'flag: Uruguay', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fa\U0001f1fe', 'Flags', 'country-flag'),
    '\U0001f1fa\U0001f1ff': EmojiRecord('\U0001f1fa\U0001f1ff', 'flag: Uzbekistan', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fa\U0001f1ff', 'Flags', 'country-flag'),
    '\U0001f1fb\U0001f1e6': EmojiRecord('\U0001f1fb\U0001f1e6', 'flag: Vatican City', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fb\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1fb\U0001f1e8': EmojiRecord('\U0001f1fb\U0001f1e8', 'flag: St. Vincent & Grenadines', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fb\U0001f1e8', 'Flags', 'country-flag'),
    '\U0001f1fb\U0001f1ea': EmojiRecord('\U0001f1fb\U0001f1ea', 'flag: Venezuela', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fb\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1fb\U0001f1ec': EmojiRecord('\U0001f1fb\U0001f1ec', 'flag: British Virgin Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fb\U0001f1ec', 'Flags', 'country-flag'),
    '\U0001f1fb\U0001f1ee': EmojiRecord('\U0001f1fb\U0001f1ee', 'flag: U.S. Virgin Islands', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fb\U0001f1ee', 'Flags', 'country-flag'),
    '\U0001f1fb\U0001f1f3': EmojiRecord('\U0001f1fb\U0001f1f3', 'flag: Vietnam', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fb\U0001f1f3', 'Flags', 'country-flag'),
    '\U0001f1fb\U0001f1fa': EmojiRecord('\U0001f1fb\U0001f1fa', 'flag: Vanuatu', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fb\U0001f1fa', 'Flags', 'country-flag'),
    '\U0001f1fc\U0001f1eb': EmojiRecord('\U0001f1fc\U0001f1eb', 'flag: Wallis & Futuna', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fc\U0001f1eb', 'Flags', 'country-flag'),
    '\U0001f1fc\U0001f1f8': EmojiRecord('\U0001f1fc\U0001f1f8', 'flag: Samoa', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fc\U0001f1f8', 'Flags', 'country-flag'),
    '\U0001f1fd\U0001f1f0': EmojiRecord('\U0001f1fd\U0001f1f0', 'flag: Kosovo', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fd\U0001f1f0', 'Flags', 'country-flag'),
    '\U0001f1fe\U0001f1ea': EmojiRecord('\U0001f1fe\U0001f1ea', 'flag: Yemen', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fe\U0001f1ea', 'Flags', 'country-flag'),
    '\U0001f1fe\U0001f1f9': EmojiRecord('\U0001f1fe\U0001f1f9', 'flag: Mayotte', Status.FULLY_QUALIFIED, '2.0', '\U0001f1fe\U0001f1f9', 'Flags', 'country-flag'),
    '\U0001f1ff\U0001f1e6': EmojiRecord('\U0001f1ff\U0001f1e6', 'flag: South Africa', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ff\U0001f1e6', 'Flags', 'country-flag'),
    '\U0001f1ff\U0001f1f2': EmojiRecord('\U0001f1ff\U0001f1f2', 'flag: Zambia', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ff\U0001f1f2', 'Flags', 'country-flag'),
    '\U0001f1ff\U0001f1fc': EmojiRecord('\U0001f1ff\U0001f1fc', 'flag: Zimbabwe', Status.FULLY_QUALIFIED, '2.0', '\U0001f1ff\U0001f1fc', 'Flags', 'country-flag'),
    '\U0001f3f4\U000e0067\U000e0062\U000e0065\U000e006e\U000e0067\U000e007f': EmojiRecord('\U0001f3f4\U000e0067\U000e0062\U000e0065\U000e006e\U000e0067\U000e007f', 'flag: England', Status.FULLY_QUALIFIED, '5.0', '\U0001f3f4\U000e0067\U000e0062\U000e0065\U000e006e\U000e0067\U000e007f', 'Flags', 'subdivision-flag'),
    '\U0001f3f4\U000e0067\U000e0062\U000e0073\U000e0063\U000e0074\U000e007f': EmojiRecord('\U0001f3f4\U000e0067\U000e0062\U000e0073\U000e0063\U000e0074\U000e007f', 'flag: Scotland', Status.FULLY_QUALIFIED, '5.0', '\U0001f3f4\U000e0067\U000e0062\U000e0073\U000e0063\U000e0074\U000e007f', 'Flags', 'subdivision-flag'),
    '\U0001f3f4\U000e0067\U000e0062\U000e0077\U000e006c\U000e0073\U000e007f': EmojiRecord('\U0001f3f4\U000e0067\U000e0062\U000e0077\U000e006c\U000e0073\U000e007f', 'flag: Wales', Status.FULLY_QUALIFIED, '5.0', '\U0001f3f4\U000e0067\U000e0062\U000e0077\U000e006c\U000e0073\U000e007f', 'Flags', 'subdivision-flag'),
}
